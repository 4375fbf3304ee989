#!/usr/bin/env python3
import aws_cdk as cdk

from ecs_auto_draining.ecs_auto_draining_stack import EcsAutoDrainingStack


app = cdk.App()
EcsAutoDrainingStack(app, "EcsAutoDrainingStack")

app.synth()
