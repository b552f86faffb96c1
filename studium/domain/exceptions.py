# studium/domain/exceptions.py

"""
Exceções personalizadas para o aplicativo.

A camada de dados sinaliza cada violação de integridade com um tipo
próprio (registro inexistente, valor duplicado, referência inválida,
exclusão bloqueada); os controllers traduzem esses tipos em respostas
com mensagens específicas de cada entidade. Se uma delas escapar sem
tratamento, o status HTTP padrão carregado aqui é usado.
"""

from fastapi import HTTPException, status
from typing import Any, Dict, List, Optional, Sequence


class StudiumException(HTTPException):
    """
    Exceção base para todas as exceções da aplicação Studium.
    Estende HTTPException do FastAPI para fornecer contexto adicional.
    """

    def __init__(
            self,
            status_code: int,
            detail: Any = None,
            headers: Optional[Dict[str, Any]] = None,
            internal_code: Optional[str] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.internal_code = internal_code


class RecordNotFoundError(StudiumException):
    """Nenhum registro com o ID informado."""

    def __init__(self, model_name: str = "Registro", record_id: Any = None):
        resource_info = f" (ID: {record_id})" if record_id is not None else ""
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{model_name} não encontrado(a){resource_info}",
            internal_code="RECORD_NOT_FOUND"
        )
        self.model_name = model_name
        self.record_id = record_id


class UniqueConstraintError(StudiumException):
    """Criação/alteração violaria uma restrição de unicidade."""

    def __init__(self, model_name: str = "Registro", fields: Sequence[str] = ()):
        self.model_name = model_name
        self.fields: List[str] = list(fields)
        label = ", ".join(self.fields) or "valor"
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Já existe {model_name} com este(a) {label}",
            internal_code="UNIQUE_CONSTRAINT"
        )


class ForeignKeyConstraintError(StudiumException):
    """Criação/alteração aponta para um registro pai inexistente."""

    def __init__(self, model_name: str = "Registro", field: Optional[str] = None):
        self.model_name = model_name
        self.field = field
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Registro relacionado não encontrado",
            internal_code="FOREIGN_KEY_CONSTRAINT"
        )


class ReferentialIntegrityError(StudiumException):
    """Exclusão bloqueada por registros dependentes."""

    def __init__(self, model_name: str = "registro", record_id: Any = None):
        self.model_name = model_name
        self.record_id = record_id
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Não é possível excluir este(a) {model_name}: existem registros associados",
            internal_code="REFERENTIAL_INTEGRITY"
        )


class InvalidInputError(StudiumException):
    """Entrada inválida, detectada antes de qualquer acesso ao banco."""

    def __init__(self, detail: str = "Entrada inválida"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            internal_code="INVALID_INPUT"
        )

