"""
Config Parser for chainorder batch runs.

Parses pipe-delimited tables from YAML config files.

Example config:
```yaml
chains: |
  Name   | Dimensions            | Parenthesize | Show table
  ------ | --------------------- | ------------ | ----------
  clrs   | 30,35,15,5,10,20,25   | yes          | no
  small  | 2,5,4,1,10            | yes          | yes
```
"""

import yaml
from dataclasses import dataclass
from typing import List, Dict


@dataclass
class ChainEntry:
    """Single row from the chains table."""
    name: str                       # Label used in output
    dims: List[int]                 # d0, d1, ..., dn
    parenthesize: bool              # Report the optimal order
    show_table: bool                # Print the DP cost table


@dataclass
class BatchConfig:
    """Complete batch configuration."""
    chains: List[ChainEntry]
    raw_yaml: dict                  # Original YAML for reference


def parse_pipe_table(table_str: str) -> List[Dict[str, str]]:
    """
    Parse a pipe-delimited table string into list of dicts.

    Parameters
    ----------
    table_str : str
        Multi-line string with pipe-delimited table

    Returns
    -------
    rows : list of dict
        Each row as a dict with column names as keys
    """
    lines = [line.strip() for line in table_str.strip().split('\n')]
    lines = [line for line in lines if line and not line.startswith('---')]

    if len(lines) < 2:
        return []

    headers = [h.strip() for h in lines[0].split('|')]
    headers = [h for h in headers if h]

    rows = []
    for line in lines[1:]:
        # Separator rows like "------ | ------"
        if line.replace('-', '').replace('|', '').strip() == '':
            continue

        values = [v.strip() for v in line.strip('|').split('|')]
        while len(values) < len(headers):
            values.append('')

        rows.append({headers[i]: values[i] for i in range(len(headers))})

    return rows


def parse_bool(value: str, default: bool = False) -> bool:
    """Parse boolean value; blank gives the default."""
    if not value or value.strip() == '':
        return default
    return value.strip().lower() in ('true', 'yes', '1', 'on')


def parse_dimensions(value: str) -> List[int]:
    """
    Parse a dimension list such as "30,35,15" or "30 35 15".

    Validation of the values is left to the solver.
    """
    parts = value.replace(',', ' ').split()
    try:
        return [int(p) for p in parts]
    except ValueError:
        raise ValueError(f"Dimensions must be integers: {value!r}") from None


def parse_chains_table(chains_str: str) -> List[ChainEntry]:
    """Parse the chains table into list of ChainEntry."""
    rows = parse_pipe_table(chains_str)
    entries = []

    for idx, row in enumerate(rows):
        name = row.get('Name', '').strip() or f"chain_{idx}"
        entry = ChainEntry(
            name=name,
            dims=parse_dimensions(row.get('Dimensions', '')),
            parenthesize=parse_bool(row.get('Parenthesize', ''), default=True),
            show_table=parse_bool(row.get('Show table', ''), default=False),
        )
        entries.append(entry)

    return entries


def load_config(config_path: str) -> BatchConfig:
    """
    Load batch configuration from YAML file.

    Parameters
    ----------
    config_path : str
        Path to YAML configuration file

    Returns
    -------
    config : BatchConfig
        Parsed configuration
    """
    with open(config_path, 'r') as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config must be a YAML mapping: {config_path}")

    chains = raw.get('chains') or ''
    if not isinstance(chains, str):
        raise ValueError("'chains' must be a pipe-delimited table string")

    return BatchConfig(
        chains=parse_chains_table(chains),
        raw_yaml=raw,
    )


__all__ = [
    'BatchConfig', 'ChainEntry',
    'load_config',
    'parse_pipe_table', 'parse_bool', 'parse_dimensions',
    'parse_chains_table',
]
