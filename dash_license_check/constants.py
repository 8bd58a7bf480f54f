"""Constants for dash-license-check."""

# Exit codes
EXIT_SUCCESS = 0  # No unhandled restricted dependencies
EXIT_FAILURE = 1  # Missing input, bad exclusions, unhandled dependencies, ...
EXIT_SCANNER_INTERNAL_ERROR = 127  # dash-licenses reported an internal error

# Status reported by dash-licenses for dependencies that need IP review
RESTRICTED_STATUS = "restricted"

# Delimiter between the fields of a summary line
SUMMARY_DELIMITER = ", "

# Environment variables
TOKEN_ENV_VAR = "DASH_TOKEN"
JAR_PATH_ENV_VAR = "DASH_LICENSES_JAR"

DASH_LICENSES_DOWNLOAD_URL = (
    "https://repo.eclipse.org/service/local/artifact/maven/redirect"
    "?r=dash-licenses&g=org.eclipse.dash&a=org.eclipse.dash.licenses&v=LATEST"
)
DASH_LICENSES_JAR_NAME = "dash-licenses.jar"
