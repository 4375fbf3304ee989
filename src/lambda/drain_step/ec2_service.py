import re
import base64
import boto3
from utils import logger, error_handler, NotFoundError

ECS_CLUSTER_PATTERN = re.compile(r'\bECS_CLUSTER=([-\w]+)')


class EC2Service:
    """Service for EC2 operations"""

    def __init__(self, client=None):
        """
        Initialize EC2 service.

        Args:
            client (EC2.Client, optional): boto3 EC2 client. Defaults to a new client.
        """
        self.client = client or boto3.client('ec2')

    @error_handler
    def get_user_data(self, instance_id):
        """
        Get the decoded user data of an instance.

        Args:
            instance_id (str): EC2 instance ID

        Returns:
            str: Decoded user data

        Raises:
            NotFoundError: If the instance has no user data
        """
        logger.info(f"[USER_DATA_QUERY] Getting user data for instance {instance_id}")
        response = self.client.describe_instance_attribute(
            InstanceId=instance_id,
            Attribute='userData'
        )

        value = response.get('UserData', {}).get('Value')
        if value is None:
            raise NotFoundError(f"instance {instance_id!r} does not have UserData")

        return base64.b64decode(value).decode('utf-8', errors='replace')

    @error_handler
    def get_ecs_cluster_name(self, instance_id):
        """
        Resolve the ECS cluster an instance joins from its ECS_CLUSTER=... user data line.

        Args:
            instance_id (str): EC2 instance ID

        Returns:
            str: ECS cluster name

        Raises:
            NotFoundError: If the user data does not name a cluster
        """
        user_data = self.get_user_data(instance_id)

        match = ECS_CLUSTER_PATTERN.search(user_data)
        if not match:
            raise NotFoundError("`UserData` does not have `ECS_CLUSTER=...`")

        cluster_name = match.group(1)
        logger.info(f"[CLUSTER_RESOLVED] Instance {instance_id} belongs to cluster {cluster_name}")
        return cluster_name
