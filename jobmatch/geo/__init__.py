from .country import infer_country_code
from .region import is_same_region

__all__ = ["infer_country_code", "is_same_region"]
