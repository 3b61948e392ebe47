from portfolio_site.app.core.config import settings
from portfolio_site.app.core.security import create_access_token
# long-lived admin token for scripts (manage_cards.py --token); 365 days in seconds
token = create_access_token({"sub": settings.admin_username}, expires_delta=365*24*60*60)
print(token)
