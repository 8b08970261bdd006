"""
Session Messages

Exact text shown to the user during a quote session.
"""

WELCOME = "Welcome to Package Express. Please follow the instructions below."

# Prompts
PROMPT_WEIGHT = "Please enter the package weight:"
PROMPT_WIDTH = "Please enter the package width:"
PROMPT_HEIGHT = "Please enter the package height:"
PROMPT_LENGTH = "Please enter the package length:"

# Validation failures
TOO_HEAVY = "Package too heavy to be shipped via Package Express. Have a good day."
TOO_BIG = "Package too big to be shipped via Package Express."
INVALID_NUMBER = "Invalid input. Please enter a numeric value."

# Result
ESTIMATE = "Your estimated total for shipping this package is: {cost}"
THANK_YOU = "Thank you!"
CANCELLED = "Cancelled."
