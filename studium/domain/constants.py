# studium/domain/constants.py

# Índice = valor de dia_semana (0 = domingo)
DIAS_SEMANA = ("Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado")


def nome_dia_semana(dia: int) -> str:
    if 0 <= dia < len(DIAS_SEMANA):
        return DIAS_SEMANA[dia]
    return str(dia)

# Maior id aceito: limite do BIGINT das chaves primárias
MAX_ID = 2 ** 63 - 1
