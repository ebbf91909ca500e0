"""jira-helper: manage Jira tickets from the terminal."""
