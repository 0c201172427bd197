"""Configuration for integration tests.

Override these values via environment variables to match your local cluster.
The cluster needs a mapping named by HZ_CATALOG_TEST_TABLE, for example:

    CREATE MAPPING person (name VARCHAR, age INT)
    TYPE IMap OPTIONS ('keyFormat'='int', 'valueFormat'='json-flat')

Example:
    export HZ_CATALOG_TEST_MEMBERS=127.0.0.1:5701
    export HZ_CATALOG_TEST_CLUSTER=dev
"""

import os

# Member address of the test cluster
TEST_MEMBERS = os.environ.get("HZ_CATALOG_TEST_MEMBERS", "127.0.0.1:5701")

# Cluster name of the test cluster
TEST_CLUSTER = os.environ.get("HZ_CATALOG_TEST_CLUSTER", "dev")

# Mapping created on the test cluster
TEST_TABLE = os.environ.get("HZ_CATALOG_TEST_TABLE", "person")

# CLI cluster arguments
CLUSTER_ARGS = ["--member", TEST_MEMBERS, "--cluster-name", TEST_CLUSTER]
