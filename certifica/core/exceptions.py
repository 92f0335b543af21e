# =============================================
# certifica/core/exceptions.py
# =============================================
from fastapi import status
from typing import Any, Dict, Optional


class AppException(Exception):
    """Base exception class for application-specific errors"""

    def __init__(
        self,
        message: str = "An application error occurred",
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# =============================================
# NOT FOUND
# =============================================

class CourseNotFoundError(AppException):
    """Exception raised when a course is not found"""

    def __init__(self, course_id: Any):
        super().__init__(
            message=f"Curso '{course_id}' não encontrado",
            status_code=status.HTTP_404_NOT_FOUND,
            details={
                "course_id": str(course_id),
                "error_type": "COURSE_NOT_FOUND"
            }
        )


class StudentNotFoundError(AppException):
    """Exception raised when a student is not found"""

    def __init__(self, student_id: Any):
        super().__init__(
            message=f"Aluno '{student_id}' não encontrado",
            status_code=status.HTTP_404_NOT_FOUND,
            details={
                "student_id": str(student_id),
                "error_type": "STUDENT_NOT_FOUND"
            }
        )


class ThemeNotFoundError(AppException):
    """Exception raised when a theme is not found"""

    def __init__(self, theme_id: str):
        super().__init__(
            message=f"Tema '{theme_id}' não encontrado",
            status_code=status.HTTP_404_NOT_FOUND,
            details={
                "theme_id": theme_id,
                "error_type": "THEME_NOT_FOUND"
            }
        )


class CertificateNotFoundError(AppException):
    """
    Raised for every failed verification lookup.

    Carries no detail about the submitted code so that an unissued
    certificate cannot be told apart from an unknown one.
    """

    def __init__(self):
        super().__init__(
            message="Certificado não encontrado ou código inválido",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"error_type": "CERTIFICATE_NOT_FOUND"}
        )


# =============================================
# CONFLICTS AND GUARDS
# =============================================

class LastThemeError(AppException):
    """Exception raised when an operation would leave no theme"""

    def __init__(self):
        super().__init__(
            message="Você deve ter pelo menos um tema cadastrado",
            status_code=status.HTTP_409_CONFLICT,
            details={"error_type": "LAST_THEME"}
        )


class DuplicateSubmissionError(AppException):
    """Exception raised when the same mutation is already in flight"""

    def __init__(self, operation: str):
        super().__init__(
            message="Operação já em andamento, aguarde a conclusão",
            status_code=status.HTTP_409_CONFLICT,
            details={
                "operation": operation,
                "error_type": "DUPLICATE_SUBMISSION"
            }
        )


class ConfirmationRequiredError(AppException):
    """Exception raised when a destructive request is not confirmed"""

    def __init__(self, resource: str):
        super().__init__(
            message=f"Confirme a exclusão de {resource} enviando confirm=true",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={
                "resource": resource,
                "error_type": "CONFIRMATION_REQUIRED"
            }
        )


class VerificationCodeExhaustedError(AppException):
    """Exception raised when no free verification code could be drawn"""

    def __init__(self, attempts: int):
        super().__init__(
            message="Não foi possível gerar um código de verificação único",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details={
                "attempts": attempts,
                "error_type": "VERIFICATION_CODE_EXHAUSTED"
            }
        )


# =============================================
# AUTHENTICATION
# =============================================

class InvalidCredentialsError(AppException):
    """Exception raised when authentication credentials are invalid"""

    def __init__(self):
        super().__init__(
            message="Usuário ou senha incorretos",
            status_code=status.HTTP_401_UNAUTHORIZED,
            details={"error_type": "INVALID_CREDENTIALS"}
        )


class InvalidTokenError(AppException):
    """Exception raised when a token is invalid or expired"""

    def __init__(self):
        super().__init__(
            message="Invalid token",
            status_code=status.HTTP_401_UNAUTHORIZED,
            details={"error_type": "INVALID_TOKEN"}
        )


# =============================================
# INFRASTRUCTURE
# =============================================

class ValidationError(AppException):
    """Exception raised when data validation fails"""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=f"Validation error in field '{field}': {message}",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details={
                "field": field,
                "validation_message": message,
                "error_type": "VALIDATION_ERROR"
            }
        )


class DatabaseError(AppException):
    """Exception raised when database operations fail"""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            message=f"Database {operation} failed: {reason}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={
                "operation": operation,
                "reason": reason,
                "error_type": "DATABASE_ERROR"
            }
        )


class ServiceUnavailableError(AppException):
    """Exception raised when the initial data load cannot reach the database"""

    def __init__(self, reason: str):
        super().__init__(
            message="Não foi possível conectar ao banco de dados. Verifique sua conexão.",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details={
                "reason": reason,
                "error_type": "SERVICE_UNAVAILABLE"
            }
        )
