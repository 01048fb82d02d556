"""
Batch Runner.

Solves every chain listed in a configuration.
"""

from typing import List

from chainorder.pipeline.config_parser import BatchConfig, ChainEntry, load_config
from chainorder.core.chain_solver import ChainSolver, ChainResult
from chainorder.core.errors import ChainInputError


class BatchRunner:
    """
    Run chain solves from configuration.
    """

    def __init__(self, config: BatchConfig, verbose: bool = True):
        """
        Parameters
        ----------
        config : BatchConfig
            Parsed configuration
        verbose : bool
            Print progress
        """
        self.config = config
        self.verbose = verbose
        self.solver = ChainSolver(verbose=False)

    def _print(self, msg: str):
        """Print if verbose."""
        if self.verbose:
            print(f"[CHAINORDER] {msg}")

    def run_all(self) -> List[ChainResult]:
        """Solve all chain entries, in config order."""
        self._print(f"Solving {len(self.config.chains)} chains")
        return [self._solve_entry(entry) for entry in self.config.chains]

    def _solve_entry(self, entry: ChainEntry) -> ChainResult:
        """Solve a single chains-table row."""
        try:
            result = self.solver.solve(entry.dims, parenthesize=entry.parenthesize)
        except ChainInputError as e:
            raise type(e)(f"Chain '{entry.name}': {e}") from e

        self._print(f"{entry.name}: {result.n_matrices} matrices, min cost {result.min_cost}")
        if result.order is not None:
            self._print(f"{entry.name}: {result.order}")

        return result


def run_pipeline(config_path: str, verbose: bool = True) -> List[ChainResult]:
    """
    Run batch solve from config file.

    Parameters
    ----------
    config_path : str
        Path to YAML config file
    verbose : bool
        Print progress

    Returns
    -------
    results : list of ChainResult
        One per configured chain
    """
    config = load_config(config_path)
    runner = BatchRunner(config=config, verbose=verbose)
    return runner.run_all()


__all__ = ['BatchRunner', 'run_pipeline']
