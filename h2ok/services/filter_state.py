"""Filter state and its canonical query-parameter form."""
from dataclasses import replace
from typing import Dict, Optional

from h2ok.models.internal_models import Category, FilterCriteria


def to_query_parameters(criteria: FilterCriteria) -> Dict[str, str]:
    """
    Serialize criteria for the partners endpoint.

    A parameter is omitted when its value means "no filter"; the service reads
    an absent parameter as unconstrained.
    """
    params: Dict[str, str] = {}
    if criteria.category != Category.ALL:
        params["category"] = criteria.category.value
    if criteria.require_hot:
        params["has_hot"] = "true"
    if criteria.require_cold:
        params["has_cold"] = "true"
    if criteria.query_text:
        params["q"] = criteria.query_text
    return params


class FilterState:
    def __init__(self, criteria: Optional[FilterCriteria] = None):
        self._criteria = criteria or FilterCriteria()

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    def set(self, **partial) -> FilterCriteria:
        """Update one or more fields and return the new criteria.

        Raises ValueError for an unknown category and TypeError for an
        unknown field name.
        """
        self._criteria = replace(self._criteria, **partial)
        return self._criteria

    def to_query_parameters(self) -> Dict[str, str]:
        return to_query_parameters(self._criteria)
