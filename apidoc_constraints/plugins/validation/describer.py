import logging

from apidoc_constraints.core.common.base_describer import BaseModelDescriber
from apidoc_constraints.core.context import MapperSettings
from apidoc_constraints.core.protocols import ConstraintSource, PropertyMapper

from .mapper import ValidationConstraintMapper

logger = logging.getLogger(__name__)


class ValidationModelDescriber(BaseModelDescriber):
    """
    Describer for classes carrying validation constraints.

    Connects a ConstraintSource with the ValidationConstraintMapper.
    """

    def __init__(
        self,
        source: ConstraintSource | None = None,
        settings: MapperSettings | None = None,
    ):
        super().__init__()
        self._mapper = ValidationConstraintMapper(source, settings)

    def get_mapper(self) -> PropertyMapper:
        """Return the validation constraint mapper instance."""
        return self._mapper
