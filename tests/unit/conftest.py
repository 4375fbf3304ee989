import base64
import logging

import boto3
import pytest
from botocore.stub import Stubber

REGION = 'us-east-1'
CLUSTER_NAME = 'my-cluster'
INSTANCE_ID = 'i-0123456789abcdef0'
CONTAINER_INSTANCE_ARN = f'arn:aws:ecs:{REGION}:123456789012:container-instance/{CLUSTER_NAME}/0a1b2c3d4e5f'
USER_DATA = f"#!/bin/bash\necho ECS_CLUSTER={CLUSTER_NAME} >> /etc/ecs/ecs.config\n"


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch):
    """Keep tests off real credentials and start with non-verbose logging."""
    monkeypatch.setenv('AWS_DEFAULT_REGION', REGION)
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.delenv('VERBOSE', raising=False)
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)


@pytest.fixture(autouse=True)
def restore_log_levels():
    names = ['', 'boto3', 'botocore']
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def lifecycle_event():
    return {
        'version': '0',
        'id': '12345678-1234-1234-1234-123456789012',
        'detail-type': 'EC2 Instance-terminate Lifecycle Action',
        'source': 'aws.autoscaling',
        'account': '123456789012',
        'time': '2026-10-19T12:00:00Z',
        'region': REGION,
        'resources': [
            f'arn:aws:autoscaling:{REGION}:123456789012:autoScalingGroup:uuid:autoScalingGroupName/my-asg'
        ],
        'detail': {
            'AutoScalingGroupName': 'my-asg',
            'EC2InstanceId': INSTANCE_ID,
            'LifecycleActionToken': '87654321-4321-4321-4321-210987654321',
            'LifecycleHookName': 'ecs-drain-hook',
            'LifecycleTransition': 'autoscaling:EC2_INSTANCE_TERMINATING',
            'NotificationMetadata': 'metadata',
        },
    }


@pytest.fixture
def ec2_client():
    return boto3.client('ec2', region_name=REGION)


@pytest.fixture
def ecs_client():
    return boto3.client('ecs', region_name=REGION)


@pytest.fixture
def autoscaling_client():
    return boto3.client('autoscaling', region_name=REGION)


@pytest.fixture
def ec2_stub(ec2_client):
    with Stubber(ec2_client) as stubber:
        yield stubber


@pytest.fixture
def ecs_stub(ecs_client):
    with Stubber(ecs_client) as stubber:
        yield stubber


@pytest.fixture
def autoscaling_stub(autoscaling_client):
    with Stubber(autoscaling_client) as stubber:
        yield stubber


def encoded(user_data):
    return base64.b64encode(user_data.encode('utf-8')).decode('ascii')
