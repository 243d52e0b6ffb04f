"""
Environment loader that checks for secure deployment environment first,
then falls back to local .env file for development.
"""

import os
import dotenv

SECURE_ENV_PATH = '/etc/ingredient-copilot/.env'
LOCAL_ENV_PATH = '.env'

if os.path.exists(SECURE_ENV_PATH):
    dotenv.load_dotenv(SECURE_ENV_PATH, override=True)
elif os.path.exists(LOCAL_ENV_PATH):
    dotenv.load_dotenv(LOCAL_ENV_PATH, override=True)
# otherwise the variables may already be set in the process environment
