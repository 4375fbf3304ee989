import json
from utils import logger, validate_lifecycle_event
from config import Config
from ec2_service import EC2Service
from ecs_service import ECSService
from autoscaling_service import AutoScalingService
from drain_processor import DrainProcessor


def lambda_handler(event, context):
    """
    Lambda handler for EC2 terminate lifecycle actions, invoked by the draining state machine

    Args:
        event (dict): EventBridge lifecycle event, as passed through the state machine
        context (LambdaContext): Lambda context

    Returns:
        dict: The event with ``detail.Wait`` set for the state machine's choice
    """
    config = Config()
    config.configure_logging()

    logger.info('[LAMBDA_START] Drain Step invoked')
    logger.info(f'[EVENT_RECEIVED] Event: {json.dumps(event)}')

    # Reject before any client is created
    validate_lifecycle_event(event)

    processor = DrainProcessor(EC2Service(), ECSService(), AutoScalingService())
    result = processor.process(event)

    logger.info('[LAMBDA_COMPLETE] Drain Step completed')
    return result
