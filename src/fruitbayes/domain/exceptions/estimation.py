"""Statistical estimation exceptions."""

from typing import Optional, Any
from .base import FruitBayesError

class EstimationError(FruitBayesError):
    """Base class for failures while estimating class statistics."""

    def __init__(
        self,
        message: str,
        *,
        class_label: Optional[str] = None,
        attribute: Optional[Any] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.class_label = class_label
        self.attribute = attribute
        if class_label is not None:
            self.add_context('class_label', class_label)
        if attribute is not None:
            self.add_context('attribute', getattr(attribute, 'label', str(attribute)))

    def _get_default_error_code(self) -> str:
        return "ESTIMATION_ERROR"


class EmptyClassError(EstimationError):
    """Raised when a class has no valid training samples for an attribute.

    The population standard deviation divides by the number of valid samples,
    so it is undefined for an empty class.
    """

    def __init__(self, class_label: str, attribute: Any, **kwargs):
        name = getattr(attribute, 'label', str(attribute))
        message = kwargs.pop(
            'message',
            f"No valid training samples for class '{class_label}' (attribute: {name})"
        )
        super().__init__(message, class_label=class_label, attribute=attribute, **kwargs)
        self.add_suggestion("Check that training samples for this class have no zero-valued features")

    def _get_default_error_code(self) -> str:
        return "EMPTY_CLASS"


class UnknownClassLabelError(EmptyClassError):
    """Raised when a candidate class label does not occur in the corpus at all."""

    def __init__(self, class_label: str, attribute: Any, **kwargs):
        name = getattr(attribute, 'label', str(attribute))
        super().__init__(
            class_label,
            attribute,
            message=f"Class '{class_label}' has no training samples (attribute: {name})",
            **kwargs
        )
        self.add_suggestion("Check the candidate class labels against the training data")

    def _get_default_error_code(self) -> str:
        return "UNKNOWN_CLASS_LABEL"
