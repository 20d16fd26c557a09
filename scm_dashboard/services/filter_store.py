import logging
from typing import Generic, Type, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

CriteriaType = TypeVar("CriteriaType", bound=BaseModel)


class FilterStore(Generic[CriteriaType]):
    """Current filter criteria of one list view.

    Owned by the view that creates it. `set_filters` merges a partial update
    over the existing criteria; values are never validated, so a filter that
    matches nothing simply yields an empty list.
    """

    def __init__(self, criteria_model: Type[CriteriaType]):
        self.criteria_model = criteria_model
        self._filters = criteria_model()

    @property
    def filters(self) -> CriteriaType:
        return self._filters

    def set_filters(self, **partial: str) -> CriteriaType:
        unknown = set(partial) - set(self.criteria_model.model_fields)
        if unknown:
            raise ValueError(f"Unknown filter fields for {self.criteria_model.__name__}: {sorted(unknown)}")
        self._filters = self._filters.model_copy(update=partial)
        logger.debug(f"Filters updated: {self._filters}")
        return self._filters

    def reset(self) -> CriteriaType:
        self._filters = self.criteria_model()
        return self._filters

    def __getattr__(self, name):
        # store.search_query, store.status_filter, ...
        if name.startswith("_") or name == "criteria_model" or name not in self.criteria_model.model_fields:
            raise AttributeError(name)
        return getattr(self._filters, name)
