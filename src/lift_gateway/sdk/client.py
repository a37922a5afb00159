"""
Gateway dependency context.

Holds the AWS handles every operation needs: the two legacy DynamoDB tables
and the Bedrock runtime client. Built once per process and shared read-only
across invocations; none of the handles carry per-request state.
"""

import logging
from typing import Any, Optional

import boto3
from botocore.config import Config

from lift_gateway.config import Settings

logger = logging.getLogger(__name__)


class GatewayContext:
    """
    Explicit dependency object passed into the router and handlers.

    Tests construct it directly with fake tables and a fake Bedrock client;
    production code uses ``GatewayContext.from_settings``.
    """

    def __init__(
        self,
        users_table: Any,
        workouts_table: Any,
        bedrock: Any,
        settings: Optional[Settings] = None,
    ):
        self._users_table = users_table
        self._workouts_table = workouts_table
        self._bedrock = bedrock
        self._settings = settings or Settings()

    @classmethod
    def from_settings(cls, settings: Settings, session: Optional[boto3.session.Session] = None) -> "GatewayContext":
        """
        Create boto3 resources for the configured region.

        Args:
            settings: Gateway settings
            session: Optional boto3 session (defaults to a new one)

        Returns:
            GatewayContext wired to DynamoDB and Bedrock
        """
        session = session or boto3.session.Session(region_name=settings.region)
        botocore_config = Config(
            connect_timeout=settings.connect_timeout,
            read_timeout=settings.read_timeout,
            retries={"mode": "standard", "total_max_attempts": settings.max_attempts},
        )

        dynamodb = session.resource("dynamodb", config=botocore_config)
        bedrock = session.client("bedrock-runtime", config=botocore_config)

        logger.info(
            "Gateway context created (region=%s, model=%s, users=%s, workouts=%s)",
            session.region_name, settings.model_id,
            settings.users_table, settings.workouts_table,
        )
        return cls(
            users_table=dynamodb.Table(settings.users_table),
            workouts_table=dynamodb.Table(settings.workouts_table),
            bedrock=bedrock,
            settings=settings,
        )

    @property
    def users_table(self) -> Any:
        return self._users_table

    @property
    def workouts_table(self) -> Any:
        return self._workouts_table

    @property
    def bedrock(self) -> Any:
        return self._bedrock

    @property
    def settings(self) -> Settings:
        return self._settings
