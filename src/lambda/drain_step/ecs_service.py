import boto3
from utils import logger, error_handler, NotFoundError

STATUS_DRAINING = 'DRAINING'
TASK_STATUS_RUNNING = 'RUNNING'
TASK_STATUS_STOPPED = 'STOPPED'


class ECSService:
    """Service for ECS operations"""

    def __init__(self, client=None):
        """
        Initialize ECS service.

        Args:
            client (ECS.Client, optional): boto3 ECS client. Defaults to a new client.
        """
        self.client = client or boto3.client('ecs')

    @error_handler
    def find_container_instance(self, cluster_name, ec2_instance_id):
        """
        Find the container instance backed by an EC2 instance.

        Args:
            cluster_name (str): ECS cluster name
            ec2_instance_id (str): EC2 instance ID

        Returns:
            dict: Container instance description

        Raises:
            NotFoundError: If no container instance in the cluster matches
        """
        logger.info(f"[CONTAINER_INSTANCE_QUERY] Looking up {ec2_instance_id} in cluster {cluster_name}")
        paginator = self.client.get_paginator('list_container_instances')

        for page in paginator.paginate(cluster=cluster_name):
            arns = page.get('containerInstanceArns', [])
            if not arns:
                continue

            response = self.client.describe_container_instances(
                cluster=cluster_name,
                containerInstances=arns
            )
            for container_instance in response.get('containerInstances', []):
                if container_instance.get('ec2InstanceId') == ec2_instance_id:
                    logger.info(
                        f"[CONTAINER_INSTANCE_FOUND] {container_instance['containerInstanceArn']} "
                        f"status {container_instance.get('status')}"
                    )
                    return container_instance

        raise NotFoundError(f"{cluster_name!r} does not have {ec2_instance_id!r}")

    @error_handler
    def set_draining(self, cluster_name, container_instance_arn):
        """
        Set a container instance to DRAINING.

        Args:
            cluster_name (str): ECS cluster name
            container_instance_arn (str): Container instance ARN

        Returns:
            dict: Response from update_container_instances_state API
        """
        logger.info(f"[INSTANCE_DRAIN_REQUEST] Setting {container_instance_arn} to {STATUS_DRAINING}")
        response = self.client.update_container_instances_state(
            cluster=cluster_name,
            containerInstances=[container_instance_arn],
            status=STATUS_DRAINING
        )
        logger.info(f"[INSTANCE_DRAIN_COMPLETE] {container_instance_arn} is {STATUS_DRAINING}")
        return response

    @error_handler
    def has_tasks(self, cluster_name, container_instance_arn):
        """
        Check whether a container instance still hosts tasks.

        A task counts when its desired status is RUNNING, or when it is
        desired STOPPED but still described as RUNNING.

        Args:
            cluster_name (str): ECS cluster name
            container_instance_arn (str): Container instance ARN

        Returns:
            bool: True if any task is still running
        """
        response = self.client.list_tasks(
            cluster=cluster_name,
            containerInstance=container_instance_arn,
            desiredStatus=TASK_STATUS_RUNNING
        )
        if response.get('taskArns'):
            logger.info(f"[TASKS_RUNNING] {len(response['taskArns'])} tasks desired RUNNING on {container_instance_arn}")
            return True

        # Stopping tasks are listed as STOPPED before they have actually stopped
        paginator = self.client.get_paginator('list_tasks')
        pages = paginator.paginate(
            cluster=cluster_name,
            containerInstance=container_instance_arn,
            desiredStatus=TASK_STATUS_STOPPED
        )
        for page in pages:
            arns = page.get('taskArns', [])
            if not arns:
                continue

            described = self.client.describe_tasks(cluster=cluster_name, tasks=arns)
            for task in described.get('tasks', []):
                if task.get('lastStatus') == TASK_STATUS_RUNNING:
                    logger.info(f"[TASKS_STOPPING] Task {task['taskArn']} is still RUNNING")
                    return True

        logger.info(f"[TASKS_NONE] No running tasks on {container_instance_arn}")
        return False
