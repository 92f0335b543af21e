# certifica/schemas/enums.py
from enum import Enum

class StudentStatusEnum(str, Enum):
    PENDENTE = "PENDENTE"
    EMITIDO = "EMITIDO"
