"""API clients."""

from jira_helper.clients.jira import JiraClient, get_client

__all__ = [
    "JiraClient",
    "get_client",
]
