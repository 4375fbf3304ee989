import pytest
from botocore.exceptions import ClientError

from conftest import CLUSTER_NAME, INSTANCE_ID, USER_DATA, encoded
from ec2_service import EC2Service
from utils import NotFoundError

EXPECTED_PARAMS = {'InstanceId': INSTANCE_ID, 'Attribute': 'userData'}


def test_cluster_name_from_user_data(ec2_client, ec2_stub):
    ec2_stub.add_response(
        'describe_instance_attribute',
        {'InstanceId': INSTANCE_ID, 'UserData': {'Value': encoded(USER_DATA)}},
        EXPECTED_PARAMS
    )

    assert EC2Service(ec2_client).get_ecs_cluster_name(INSTANCE_ID) == CLUSTER_NAME
    ec2_stub.assert_no_pending_responses()


def test_cluster_name_stops_at_non_word_characters(ec2_client, ec2_stub):
    user_data = "[settings.ecs]\nMY_ECS_CLUSTER=other\nECS_CLUSTER=prod-web_1'\n"
    ec2_stub.add_response(
        'describe_instance_attribute',
        {'InstanceId': INSTANCE_ID, 'UserData': {'Value': encoded(user_data)}},
        EXPECTED_PARAMS
    )

    assert EC2Service(ec2_client).get_ecs_cluster_name(INSTANCE_ID) == 'prod-web_1'


def test_missing_cluster_setting(ec2_client, ec2_stub):
    ec2_stub.add_response(
        'describe_instance_attribute',
        {'InstanceId': INSTANCE_ID, 'UserData': {'Value': encoded('#!/bin/bash\nyum update -y\n')}},
        EXPECTED_PARAMS
    )

    with pytest.raises(NotFoundError, match='ECS_CLUSTER'):
        EC2Service(ec2_client).get_ecs_cluster_name(INSTANCE_ID)


def test_instance_without_user_data(ec2_client, ec2_stub):
    ec2_stub.add_response(
        'describe_instance_attribute',
        {'InstanceId': INSTANCE_ID, 'UserData': {}},
        EXPECTED_PARAMS
    )

    with pytest.raises(NotFoundError, match='does not have UserData'):
        EC2Service(ec2_client).get_user_data(INSTANCE_ID)


def test_client_errors_pass_through(ec2_client, ec2_stub):
    ec2_stub.add_client_error(
        'describe_instance_attribute',
        service_error_code='InvalidInstanceID.NotFound',
        http_status_code=400
    )

    with pytest.raises(ClientError):
        EC2Service(ec2_client).get_ecs_cluster_name(INSTANCE_ID)
