"""
Módulo Central de Extensões.
Evita importações circulares centralizando as instâncias das extensões.
"""
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_wtf.csrf import CSRFProtect

# 1. Limiter (Rate Limiting)
# Os limites padrão vêm de RATELIMIT_DEFAULT na configuração.
limiter = Limiter(
    key_func=get_remote_address,
    # Para dev/demo, memória é ok.
    storage_uri="memory://"
)

# 2. CSRF Protection (formulários das páginas)
csrf = CSRFProtect()

# 3. CORS (a API aceita pedidos de outras origens)
cors = CORS()
