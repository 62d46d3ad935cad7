SEARCH_PAGE_SIZE = 27

# Escape character for LIKE patterns built from user input
LIKE_ESCAPE = "\\"
