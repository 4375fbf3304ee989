import boto3
from utils import logger, error_handler

LIFECYCLE_ACTION_CONTINUE = 'CONTINUE'


class AutoScalingService:
    """Service for Auto Scaling lifecycle hook operations"""

    def __init__(self, client=None):
        self.client = client or boto3.client('autoscaling')

    @error_handler
    def record_heartbeat(self, detail):
        """
        Extend the lifecycle hook timeout.

        Args:
            detail (dict): Lifecycle event detail

        Returns:
            dict: Response from record_lifecycle_action_heartbeat API
        """
        logger.info(
            f"[LIFECYCLE_HEARTBEAT] Extending {detail['LifecycleHookName']} "
            f"for {detail['AutoScalingGroupName']}"
        )
        return self.client.record_lifecycle_action_heartbeat(
            AutoScalingGroupName=detail['AutoScalingGroupName'],
            LifecycleActionToken=detail['LifecycleActionToken'],
            LifecycleHookName=detail['LifecycleHookName']
        )

    @error_handler
    def complete_lifecycle_action(self, detail, result=LIFECYCLE_ACTION_CONTINUE):
        """
        Release the lifecycle hook.

        Args:
            detail (dict): Lifecycle event detail
            result (str, optional): Lifecycle action result. Defaults to CONTINUE.

        Returns:
            dict: Response from complete_lifecycle_action API
        """
        logger.info(
            f"[LIFECYCLE_COMPLETE] Completing {detail['LifecycleHookName']} "
            f"for {detail['AutoScalingGroupName']} with {result}"
        )
        return self.client.complete_lifecycle_action(
            AutoScalingGroupName=detail['AutoScalingGroupName'],
            LifecycleActionResult=result,
            LifecycleActionToken=detail['LifecycleActionToken'],
            LifecycleHookName=detail['LifecycleHookName']
        )
