"""Test configuration and fixtures."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest
from unittest.mock import Mock

from clustermgr.aws import AWSClient
from clustermgr.core.interactive import Prompter
from clustermgr.model.cluster import ClusterRecord
from clustermgr.model.membership import Creator
from clustermgr.ocm import ManagementClient

CREATOR_ARN = "arn:aws:iam::123456789012:user/admin"


class ScriptedPrompter(Prompter):
    """Interactive prompter answering from a script instead of a terminal."""

    enabled = True

    def __init__(self, answers: Optional[Dict[str, str]] = None):
        self.answers = answers or {}
        self.questions: List[Dict[str, Any]] = []

    def ask(self, question, options=None, default=None, required=False, help=None):
        self.questions.append({"question": question, "options": options, "default": default})
        return self.answers.get(question, default)


@pytest.fixture
def fixed_now():
    """A fixed point in time, in UTC."""
    return datetime(2020, 11, 4, 9, 55, tzinfo=timezone.utc)


@pytest.fixture
def sample_cluster_data():
    """Sample cluster as returned by the management API."""
    return {
        "kind": "Cluster",
        "id": "1a2b3c4d5e6f",
        "name": "mycluster",
        "external_id": "0e1f8a2b-0000-4c3d-9e8f-1234567890ab",
        "state": "ready",
        "openshift_version": "4.5.19",
        "version": {"id": "openshift-v4.5.19", "channel_group": "stable"},
    }


@pytest.fixture
def ready_cluster(sample_cluster_data):
    return ClusterRecord(**sample_cluster_data)


@pytest.fixture
def mock_client(ready_cluster):
    """Mock management API client for unit tests."""
    client = Mock(spec=ManagementClient)
    client.get_cluster = Mock(return_value=ready_cluster)
    client.get_scheduled_upgrade = Mock(return_value=None)
    client.get_available_upgrades = Mock(return_value=["4.5.20", "4.5.21"])
    client.add_upgrade_policy = Mock(return_value={"id": "policy-1"})
    client.update_cluster = Mock(return_value={})
    client.delete_group_user = Mock(return_value=None)
    return client


@pytest.fixture
def mock_aws_client():
    """Mock AWS client returning a fixed identity."""
    aws_client = Mock(spec=AWSClient)
    aws_client.get_creator = Mock(
        return_value=Creator(arn=CREATOR_ARN, account_id="123456789012", user_id="AIDAEXAMPLE")
    )
    return aws_client


@pytest.fixture
def prompter_factory():
    """Build scripted interactive prompters with given answers."""
    return ScriptedPrompter
