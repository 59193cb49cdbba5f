from eipflow.domain.entity import EipConfig
from eipflow.domain.value_object import InternetChargeType

MAX_BANDWIDTH_OUT = 200


def validate_config(config: EipConfig) -> bool:
    """Validates the EIP step configuration.

    Args:
        config: The EipConfig instance to validate.

    Returns:
        True if the configuration is valid, raises ValueError otherwise.
    """
    if not config.ssh_private_ip:
        # Charge type, bandwidth and region only apply when an eip is allocated.
        charge_types = {t.value for t in InternetChargeType}
        if config.internet_charge_type not in charge_types:
            raise ValueError(
                f"Invalid internet_charge_type: {config.internet_charge_type} (expected one of {sorted(charge_types)})"
            )
        if not 0 <= config.internet_max_bandwidth_out <= MAX_BANDWIDTH_OUT:
            raise ValueError(f"internet_max_bandwidth_out must be between 0 and {MAX_BANDWIDTH_OUT}")
        if not config.region_id:
            raise ValueError("region_id is required to allocate an eip")
    if config.wait_timeout <= 0:
        raise ValueError(f"wait_timeout must be positive, got {config.wait_timeout}")
    return True
