import json
import logging

from eipflow import RunResult, create
from eipflow.infrastructure.adapter.in_memory.ecs_client import InMemoryEcsClient

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    my_config = {
        "region_id": "cn-hangzhou",
        "associate_public_ip_address": True,
        "internet_charge_type": "PayByTraffic",
        "internet_max_bandwidth_out": 5,
    }
    my_instance = {
        "instance_id": "i-bp1example",
        "private_ip_addresses": ["172.16.0.10"],
    }

    ecs_client = InMemoryEcsClient()
    client = create(ecs_client, config=my_config)
    result: RunResult = client.run(my_instance)

    print("Run result:")
    print(json.dumps(result.to_dict(), indent=2))
    print(result.status.value)
    print(f"Eips still allocated after cleanup: {len(ecs_client.addresses)}")
