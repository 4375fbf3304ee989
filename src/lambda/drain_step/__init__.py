# Drain Step Lambda Function
# This package drains ECS container instances on Auto Scaling scale-in

from handler import lambda_handler
from config import Config
from ec2_service import EC2Service
from ecs_service import ECSService
from autoscaling_service import AutoScalingService
from drain_processor import DrainProcessor
from utils import validate_lifecycle_event, DrainError, ValidationError, NotFoundError

__all__ = [
    'lambda_handler',
    'Config',
    'EC2Service',
    'ECSService',
    'AutoScalingService',
    'DrainProcessor',
    'validate_lifecycle_event',
    'DrainError',
    'ValidationError',
    'NotFoundError'
]
