from pathlib import Path

import msgspec

from eipflow.application.adapter import StepConfigEip
from eipflow.domain.entity import EipConfig, Instance
from eipflow.domain.port import Step
from eipflow.domain.service import validate_config


def load_config(data: dict | EipConfig) -> EipConfig:
    """Decodes and validates an EIP step configuration.

    Args:
        data: The configuration as a dictionary or an EipConfig.

    Returns:
        A validated EipConfig.
    """
    if isinstance(data, EipConfig):
        validate_config(data)
        return data

    config = msgspec.convert(data, type=EipConfig)
    validate_config(config)
    return config


def load_config_file(path: str | Path) -> EipConfig:
    """Reads an EIP step configuration from a JSON or YAML file."""
    path = Path(path)
    raw = path.read_bytes()
    if path.suffix == ".json":
        config = msgspec.json.decode(raw, type=EipConfig)
    elif path.suffix in {".yaml", ".yml"}:
        config = msgspec.yaml.decode(raw, type=EipConfig)
    else:
        raise ValueError(f"Unsupported config file type: {path.suffix or path.name}")
    validate_config(config)
    return config


def load_instance(data: dict | Instance) -> Instance:
    """Decodes an instance descriptor produced by the instance creation step."""
    if isinstance(data, Instance):
        return data
    return msgspec.convert(data, type=Instance)


def build_steps(config: EipConfig) -> list[Step]:
    """Returns the addressing steps the configuration asks for."""
    if config.associate_public_ip_address or config.ssh_private_ip:
        return [StepConfigEip(config)]
    return []
