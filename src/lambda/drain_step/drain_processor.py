from utils import logger, validate_lifecycle_event
from ecs_service import STATUS_DRAINING


class DrainProcessor:
    """Processor for terminate lifecycle actions on ECS container instances"""

    def __init__(self, ec2_service, ecs_service, autoscaling_service):
        """
        Initialize drain processor.

        Args:
            ec2_service (EC2Service): EC2 service instance
            ecs_service (ECSService): ECS service instance
            autoscaling_service (AutoScalingService): Auto Scaling service instance
        """
        self.ec2_service = ec2_service
        self.ecs_service = ecs_service
        self.autoscaling_service = autoscaling_service

    def process(self, event):
        """
        Drain the instance named by a terminate lifecycle event.

        The event detail gets a boolean ``Wait`` flag: True while tasks are
        still running and the hook was extended, False once the hook was
        completed.

        Args:
            event (dict): EventBridge lifecycle event

        Returns:
            dict: The same event with ``detail.Wait`` set
        """
        detail = validate_lifecycle_event(event)
        instance_id = detail['EC2InstanceId']

        cluster_name = self.ec2_service.get_ecs_cluster_name(instance_id)
        container_instance = self.ecs_service.find_container_instance(cluster_name, instance_id)
        container_instance_arn = container_instance['containerInstanceArn']

        if container_instance.get('status') != STATUS_DRAINING:
            self.ecs_service.set_draining(cluster_name, container_instance_arn)
        else:
            logger.info(f"[INSTANCE_ALREADY_DRAINING] {container_instance_arn} is already {STATUS_DRAINING}")

        if self.ecs_service.has_tasks(cluster_name, container_instance_arn):
            self.autoscaling_service.record_heartbeat(detail)
            detail['Wait'] = True
        else:
            self.autoscaling_service.complete_lifecycle_action(detail)
            detail['Wait'] = False

        logger.info(f"[DRAIN_STATUS] Instance {instance_id} Wait={detail['Wait']}")
        return event
