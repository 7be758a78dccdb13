# Menu choices
ADD_URL = '1'
VISIT_URL = '2'
VIEW_STATS = '3'
EXIT = '4'

MENU = """
--- URL Shortener Menu ---
1. Add URL
2. Visit URL
3. View Stats
4. Exit"""

# Prompts
CHOOSE_PROMPT = 'Choose: '
URL_PROMPT = 'Enter original URL: '
ALIAS_PROMPT = 'Enter custom alias (optional): '
CODE_PROMPT = 'Enter code: '

# User-facing failure messages
ALIAS_EXISTS_MESSAGE = 'Custom alias already exists.'
CODE_NOT_FOUND_MESSAGE = 'Code not found.'
INVALID_CHOICE_MESSAGE = 'Invalid choice.'

# Log event codes
SHORT_URL_CREATED = 'SHORT_URL_CREATED'
INVALID_URL = 'INVALID_URL'
ALIAS_CONFLICT = 'ALIAS_CONFLICT'
SHORT_URL_VISITED = 'SHORT_URL_VISITED'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
INVALID_CHOICE = 'INVALID_CHOICE'
