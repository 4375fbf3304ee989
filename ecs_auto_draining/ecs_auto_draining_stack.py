from aws_cdk import (
    Duration,
    Stack,
    aws_lambda as lambda_,
    aws_iam as iam,
    aws_logs as logs,
    aws_events as events,
    aws_events_targets as targets,
    aws_stepfunctions as sfn,
    aws_stepfunctions_tasks as tasks,
    CfnOutput
)
from constructs import Construct
from ecs_auto_draining.config import Config

DETAIL_TYPE_TERMINATE_LIFECYCLE = "EC2 Instance-terminate Lifecycle Action"

DRAIN_STEP_ACTIONS = [
    "autoscaling:CompleteLifecycleAction",
    "autoscaling:RecordLifecycleActionHeartbeat",
    "ec2:DescribeInstanceAttribute",
    "ecs:DescribeContainerInstances",
    "ecs:DescribeTasks",
    "ecs:ListContainerInstances",
    "ecs:ListTasks",
    "ecs:UpdateContainerInstancesState"
]

class EcsAutoDrainingStack(Stack):

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Load configuration
        config = Config.get_config()

        # Lambda function for the drain step
        drain_step = lambda_.Function(
            self, "DrainStepFunction",
            runtime=lambda_.Runtime.PYTHON_3_13,
            code=lambda_.Code.from_asset("src/lambda/drain_step"),
            handler="handler.lambda_handler",
            timeout=Duration.seconds(int(config["LAMBDA_TIMEOUT_SECONDS"])),
            memory_size=int(config["LAMBDA_MEMORY_SIZE"]),
            tracing=lambda_.Tracing.ACTIVE,
            environment={
                "VERBOSE": str(config["VERBOSE"])
            },
            description="Lambda function to drain ECS container instances on Auto Scaling scale-in"
        )

        drain_step.add_to_role_policy(
            iam.PolicyStatement(
                actions=DRAIN_STEP_ACTIONS,
                resources=["*"]
            )
        )

        logs.LogGroup(
            self, "FunctionLogGroup",
            log_group_name=f"/aws/lambda/{drain_step.function_name}",
            retention=logs.RetentionDays[config["LOG_RETENTION"]]
        )

        # Poll the drain step until it reports detail.Wait == false
        invoke_drain_step = tasks.LambdaInvoke(
            self, "Function",
            lambda_function=drain_step,
            payload_response_only=True
        )
        wait = sfn.Wait(
            self, "Wait",
            time=sfn.WaitTime.duration(Duration.seconds(int(config["POLL_INTERVAL_SECONDS"])))
        )
        succeeded = sfn.Succeed(self, "Succeeded")
        failed = sfn.Fail(
            self, "Failed",
            error="InvalidResult",
            cause="`detail.Wait` key does not exist"
        )
        wait_choice = (
            sfn.Choice(self, "Wait?")
            .when(sfn.Condition.boolean_equals("$.detail.Wait", True), wait.next(invoke_drain_step))
            .when(sfn.Condition.boolean_equals("$.detail.Wait", False), succeeded)
            .otherwise(failed)
        )

        state_machine = sfn.StateMachine(
            self, "ECSAutoDraining",
            definition_body=sfn.DefinitionBody.from_chainable(invoke_drain_step.next(wait_choice)),
            timeout=Duration.seconds(int(config["STATE_MACHINE_TIMEOUT_SECONDS"]))
        )

        # EventBridge rule to capture terminate lifecycle actions
        lifecycle_rule = events.Rule(
            self, "Rule",
            event_pattern=events.EventPattern(
                source=["aws.autoscaling"],
                detail_type=[DETAIL_TYPE_TERMINATE_LIFECYCLE]
            ),
            description="Rule to start ECS draining on EC2 instance terminate lifecycle actions"
        )

        lifecycle_rule.add_target(targets.SfnStateMachine(state_machine))

        CfnOutput(
            self, "StateMachineArn",
            value=state_machine.state_machine_arn,
            description="ECS Auto Draining state machine ARN"
        )

        CfnOutput(
            self, "FunctionName",
            value=drain_step.function_name,
            description="Drain step Lambda function name"
        )

