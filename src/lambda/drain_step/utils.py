import logging
from functools import wraps

# Configure logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)

DETAIL_TYPE_TERMINATE_LIFECYCLE = "EC2 Instance-terminate Lifecycle Action"
LIFECYCLE_TRANSITION_TERMINATING = "autoscaling:EC2_INSTANCE_TERMINATING"

REQUIRED_DETAIL_FIELDS = (
    'AutoScalingGroupName',
    'EC2InstanceId',
    'LifecycleActionToken',
    'LifecycleHookName',
)


class DrainError(Exception):
    """Base class for errors raised by the drain step"""


class ValidationError(DrainError):
    """The event is not a terminate lifecycle action"""


class NotFoundError(DrainError):
    """A cluster or container instance could not be found"""


def error_handler(func):
    """
    Decorator for consistent error logging across service calls.

    The original exception is re-raised so the invocation fails and the
    state machine sees the error.

    Args:
        func: The function to wrap with error logging

    Returns:
        The wrapped function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.error(f"[ERROR] Error in {func.__name__}: {str(e)}")
            raise
    return wrapper


def validate_lifecycle_event(event):
    """
    Validates that the event is an EC2 instance terminate lifecycle action.

    Args:
        event (dict): The event to validate

    Returns:
        dict: The event detail

    Raises:
        ValidationError: If the event is of another category or transition
    """
    logger.info("[EVENT_VALIDATION] Validating event type and lifecycle transition")
    detail_type = event.get("detail-type")
    if detail_type != DETAIL_TYPE_TERMINATE_LIFECYCLE:
        logger.error(f"[EVENT_VALIDATION_FAILED] detail-type is {detail_type!r}")
        raise ValidationError(
            f"`detail-type` is {detail_type!r}, not {DETAIL_TYPE_TERMINATE_LIFECYCLE!r}"
        )

    detail = event.get("detail")
    if not isinstance(detail, dict):
        logger.error("[EVENT_VALIDATION_FAILED] Event has no detail")
        raise ValidationError("`detail` is missing or is not an object")

    transition = detail.get("LifecycleTransition")
    if transition != LIFECYCLE_TRANSITION_TERMINATING:
        logger.error(f"[EVENT_VALIDATION_FAILED] LifecycleTransition is {transition!r}")
        raise ValidationError(
            f"`LifecycleTransition` is {transition!r}, not {LIFECYCLE_TRANSITION_TERMINATING!r}"
        )

    missing = [field for field in REQUIRED_DETAIL_FIELDS if not detail.get(field)]
    if missing:
        logger.error(f"[EVENT_VALIDATION_FAILED] Missing detail fields: {', '.join(missing)}")
        raise ValidationError(f"`detail` is missing {', '.join(missing)}")

    logger.info("[EVENT_VALIDATION_SUCCESS] Event is a terminate lifecycle action")
    return detail
