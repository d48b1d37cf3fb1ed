import os

# Application Metadata
PROJECT_NAME = os.getenv("PROJECT_NAME", "Beer Catalog Service")
VERSION = "1.0.0"

# Route Configuration
API_PREFIX = os.getenv("API_PREFIX", "/api/v1/beer")
GRAPHQL_PATH = os.getenv("GRAPHQL_PATH", "/graphql")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Load the demo beers into the store when the app is created
SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "true").lower() in {"1", "true", "yes"}
