from .config import IntervalkitConfig, load_config, validate_config  # noqa: F401
