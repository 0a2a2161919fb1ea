from functools import lru_cache

from ..config import get_settings
from ..decision.client import DecisionClient


@lru_cache
def get_decision_client() -> DecisionClient:
    return DecisionClient.from_settings(get_settings())
