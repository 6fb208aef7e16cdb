__version__ = '0.1.0'

from akj.builders import CriteriaBuilder, Property  # noqa: E402
from akj.catalog import RULE_FORMAT  # noqa: E402

__all__ = ['CriteriaBuilder', 'Property', 'RULE_FORMAT', '__version__']
