"""
View layer.

- pages.py: page identities and text renderers
- controller.py: command handlers per page
- notifications.py: notices and confirmation prompts
- formatting.py: dates, priority labels, ANSI styling
"""
