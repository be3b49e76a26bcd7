"""Shared fixtures for valuescope integration tests.

Provides realistic chart values documents for two releases of the same
chart, plus a loader wired to a mapping-backed source and a fake clock.
"""

from __future__ import annotations

from datetime import timedelta

import pytest

from valuescope.cache.store import ExpiringStore
from valuescope.loader.service import StaticValuesSource, ValuesLoader

CHART = "bitnami/nginx"

NGINX_15_0_0 = """\
# Default values for nginx.
replicaCount: 1

image:
  registry: docker.io
  repository: bitnami/nginx
  tag: 1.25.3
  pullPolicy: IfNotPresent

service:
  type: LoadBalancer
  ports:
    http: 80
    https: 443
  annotations: {}

resources:
  limits: {}
  requests: {}

extraEnvVars:
  - name: LOG_LEVEL
    value: info

metrics:
  enabled: false
  port: 9113
"""

NGINX_15_1_0 = """\
# Default values for nginx.
replicaCount: 1

image:
  registry: docker.io
  repository: bitnami/nginx
  tag: 1.25.4
  pullPolicy: IfNotPresent
  digest: ""

service:
  type: LoadBalancer
  ports:
    http: 80
    https: 443
  annotations: {}

resources:
  limits: {}
  requests: {}

extraEnvVars:
  - name: LOG_LEVEL
    value: info

metrics:
  enabled: false
"""


@pytest.fixture
def source() -> StaticValuesSource:
    return StaticValuesSource(
        {
            CHART: NGINX_15_1_0,
            f"{CHART}@15.0.0": NGINX_15_0_0,
            f"{CHART}@15.1.0": NGINX_15_1_0,
        }
    )


@pytest.fixture
def store(clock) -> ExpiringStore:
    return ExpiringStore(ttl=timedelta(minutes=30), clock=clock)


@pytest.fixture
def loader(source: StaticValuesSource, store: ExpiringStore) -> ValuesLoader:
    return ValuesLoader(source, store)
