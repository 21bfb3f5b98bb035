from .kcl_config import KinesisClientLibConfiguration as KinesisClientLibConfiguration
