"""
Stage interface for the view pipeline.

Row-shaping stages (filter, sort) implement the ViewStage protocol: a pure
function from a list of row dicts plus the current view parameters to a new
list. Stages never mutate the rows they receive and never touch the record
store.
"""

from __future__ import annotations

from typing import Any, Dict, List, Protocol, runtime_checkable

from product_grid.domain.models import ViewParameters

Row = Dict[str, Any]


@runtime_checkable
class ViewStage(Protocol):
    """
    Common interface all row-shaping stages implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier, used in log context.
    """

    name: str

    def apply(self, rows: List[Row], params: ViewParameters) -> List[Row]:
        """
        Return the rows this stage keeps, in the order it defines.

        Parameters
        ----------
        rows : list[dict]
            Output of the previous stage; must not be mutated.
        params : ViewParameters
            Current filter, sort, and pagination settings.
        """
        ...


__all__ = ["Row", "ViewStage"]
