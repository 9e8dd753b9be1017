"""Base contract enforcement utilities.

The require() function is the single enforcement mechanism for all contracts
and stage preconditions in the pipeline.
"""

from typing import Type

from anaviz.contracts.failure import ContractViolation, PipelineError


def require(condition: bool, message: str,
            error: Type[PipelineError] = ContractViolation) -> None:
    """Enforce a pipeline contract or stage precondition.

    Fail-fast: no recovery, no fallback, no silence.

    Parameters
    ----------
    condition : bool
        The invariant that must be true.

    message : str
        Error message explaining the violation (for diagnostics).

    error : type, optional
        Exception class to raise. Defaults to ContractViolation; stages pass
        ValidationError, InvalidInputError etc. for their own preconditions.

    Raises
    ------
    PipelineError
        The requested subclass, if condition is False.

    Examples
    --------
    >>> require(len(data) > 0, "Invalid input data: expected a non-empty sequence",
    ...         InvalidInputError)
    """
    if not condition:
        raise error(message)
