"""
Constantes del sistema.
Valores fijos utilizados en toda la aplicación.
"""

# ============================================
# ALIAS DE CAMPOS DE RECURSOS
# ============================================
# Por tipo de recurso: (clave canónica, columna del modelo, alias en orden
# de prioridad). El primer alias presente en el payload gana; si ninguno
# viene, el valor es 0. Orden: etiqueta principal, camelCase, snake_case.

CAMPOS_CAMAS = (
    ("ICU", "uci", ("ICU", "icu")),
    ("General", "general", ("General", "general")),
    ("Emergency", "emergencia", ("Emergency", "emergency")),
    ("Maternity", "maternidad", ("Maternity", "maternity")),
    ("Pediatric", "pediatria", ("Pediatric", "pediatric")),
)

CAMPOS_SANGRE = (
    ("A_Positive", "a_positivo", ("A_Positive", "aPositive", "a_positive", "A+")),
    ("B_Positive", "b_positivo", ("B_Positive", "bPositive", "b_positive", "B+")),
    ("O_Positive", "o_positivo", ("O_Positive", "oPositive", "o_positive", "O+")),
    ("AB_Positive", "ab_positivo", ("AB_Positive", "abPositive", "ab_positive", "AB+")),
)

CAMPOS_OXIGENO = (
    ("Oxygen Cylinders", "cilindros", ("Oxygen Cylinders", "oxygenCylinders", "oxygen_cylinders")),
    ("Liquid Oxygen", "oxigeno_liquido", ("Liquid Oxygen", "liquidOxygen", "liquid_oxygen")),
)

CAMPOS_AMBULANCIA = (
    ("total", "total", ("Total", "total")),
    ("inOperation", "en_operacion", ("In Operation", "inOperation", "in_operation")),
    ("underMaintenance", "en_mantenimiento", ("Under Maintenance", "underMaintenance", "under_maintenance")),
)


# ============================================
# MENSAJES
# ============================================

NOMBRE_RECURSO = {
    "beds": "camas",
    "blood": "sangre",
    "oxygen": "oxígeno",
    "ambulance": "ambulancias",
}

# Tope de una columna INTEGER (32 bits en Postgres)
MAX_CONTADOR = 2**31 - 1

MENSAJE_NO_AUTENTICADO = "Unauthorized"
MENSAJE_ERROR_INTERNO = "Internal server error"


# ============================================
# CHAT-BOT
# ============================================

SALUDO_DR_BERA = "Hi, I am Doctor Bera. How can I assist you today?"
