#!/usr/bin/env python3
"""
Genera los secrets de producción de MedConecta e imprime un .env de ejemplo.
"""

import argparse
import secrets


def generate_jwt_secret(length=64):
    """Genera un JWT secret seguro"""
    return secrets.token_urlsafe(length)


def render_env(jwt_secret):
    return f"""# ============================================
# CONFIGURACIÓN DE PRODUCCIÓN - AUTO-GENERADO
# ============================================
# NO COMMITEAR ESTE ARCHIVO A GIT

APP_ENV=production
DEBUG=False

# JWT
JWT_SECRET_KEY={jwt_secret}
JWT_ALGORITHM=HS256
JWT_ACCESS_TOKEN_EXPIRE_MINUTES=1440

# Base de datos - completar manualmente
DATABASE_URL=postgresql://usuario:[PASSWORD]@[HOST]:5432/medconecta

# Dr. Bera - completar manualmente
BERA_API_URL=https://[HOST-DR-BERA]

# CORS
CORS_ORIGINS=["https://[TU-DOMINIO]"]
"""


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--env", metavar="ARCHIVO", help="escribe un .env de producción en ARCHIVO")
    args = parser.parse_args()

    jwt_secret = generate_jwt_secret()
    print("JWT_SECRET_KEY:")
    print(f"   {jwt_secret}")

    if args.env:
        with open(args.env, "w") as f:
            f.write(render_env(jwt_secret))
        print(f"\n✅ Archivo {args.env} creado; completa DATABASE_URL y BERA_API_URL")


if __name__ == "__main__":
    main()
