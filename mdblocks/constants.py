"""Platform limits of the Block Kit surface."""

# Text limits, in characters
SECTION_TEXT_MAX_LENGTH = 3000
HEADER_TEXT_MAX_LENGTH = 150
IMAGE_URL_MAX_LENGTH = 3000
IMAGE_ALT_TEXT_MAX_LENGTH = 2000
IMAGE_TITLE_MAX_LENGTH = 2000

# Table shape limits
TABLE_MAX_ROWS = 100
TABLE_MAX_COLUMNS = 20
