"""
Service context extraction for log lines.

Identifies which service instance wrote a log line so that output from
several containers can be told apart once aggregated.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'hotel-booking')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostname when running in docker/k8s, PID otherwise
    instance_id = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id}'
