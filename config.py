import logging
import os
from dotenv import load_dotenv

load_dotenv()

TG_BOT_TOKEN = os.getenv('TELEGRAM_BOT_TOKEN')
PROXY_URL = os.getenv('PROXY_URL')

# Upper bound for record and flashcard ids; 256-bit like the original ledger
ID_LIMIT = int(os.getenv('FORGE_ID_LIMIT', str(2 ** 256 - 1)))

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=os.getenv('LOG_LEVEL', 'INFO').upper()
)
