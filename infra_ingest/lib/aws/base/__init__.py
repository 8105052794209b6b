from .aws_module import AWSModule
