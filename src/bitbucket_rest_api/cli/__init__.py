"""Command line interface for the Bitbucket REST API client."""
