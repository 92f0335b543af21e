# =============================================
# certifica/api/v1/endpoints/students.py
# =============================================
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from uuid import UUID

from certifica.config.database import get_db
from certifica.services.student_service import StudentService
from certifica.schemas.student import StudentCreate, StudentUpdate, StudentResponse
from certifica.database.models.admin_user import AdminUser
from certifica.api.v1.endpoints.auth import get_current_admin, guard_mutation, require_confirmation

# =============================================
# ROUTER INSTANCE
# =============================================
router = APIRouter()

# =============================================
# DEPENDENCIES
# =============================================
async def get_student_service(db: AsyncSession = Depends(get_db)) -> StudentService:
    return StudentService(db)

# =============================================
# STUDENT CRUD ROUTES
# =============================================

@router.post("/", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
async def create_student(
    student_data: StudentCreate,
    current_admin: AdminUser = Depends(guard_mutation),
    student_service: StudentService = Depends(get_student_service)
):
    """
    Cadastrar aluno

    **Requer autenticação**

    - **name**: Nome completo (salvo em maiúsculas)
    - **cpf**: CPF, com ou sem máscara
    - **course_id**: Curso existente
    - **completion_date**: Data de conclusão AAAA-MM-DD (padrão: hoje)

    O aluno começa com status PENDENTE.
    """
    return await student_service.create_student(student_data)

@router.get("/", response_model=List[StudentResponse])
async def get_students(
    search: Optional[str] = Query(None, description="Filtra por nome, CPF ou curso"),
    current_admin: AdminUser = Depends(get_current_admin),
    student_service: StudentService = Depends(get_student_service)
):
    """
    Listar alunos em ordem de cadastro

    **Requer autenticação**

    - **search**: Termo buscado (sem diferenciar maiúsculas) no nome, CPF e nome do curso
    """
    return await student_service.get_students(search)

@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(
    student_id: UUID,
    current_admin: AdminUser = Depends(get_current_admin),
    student_service: StudentService = Depends(get_student_service)
):
    """
    Obter aluno por ID

    **Requer autenticação**
    """
    return await student_service.get_student(student_id)

@router.put("/{student_id}", response_model=StudentResponse)
async def update_student(
    student_id: UUID,
    student_data: StudentUpdate,
    current_admin: AdminUser = Depends(guard_mutation),
    student_service: StudentService = Depends(get_student_service)
):
    """
    Atualizar cadastro do aluno

    **Requer autenticação**

    Status e código de verificação só mudam pela emissão do certificado.
    """
    return await student_service.update_student(student_id, student_data)

@router.delete("/{student_id}")
async def delete_student(
    student_id: UUID,
    confirmed: bool = Depends(require_confirmation("aluno")),
    current_admin: AdminUser = Depends(guard_mutation),
    student_service: StudentService = Depends(get_student_service)
):
    """
    Excluir aluno

    **Requer autenticação e confirm=true**
    """
    await student_service.delete_student(student_id)
    return {"message": "Aluno excluído com sucesso"}
