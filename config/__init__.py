import os

def get_settings_module() -> str:
    # Ambiente vem de APP_ENV, padrão 'development'
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Produção
    if env in {"prod", "production"}:
        return "config.production"
    
    # 2. Testes
    if env in {"test", "testing"}:
        return "config.testing"
    
    # 3. Qualquer outro valor cai em development
    return "config.development"
