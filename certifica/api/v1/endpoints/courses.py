# =============================================
# certifica/api/v1/endpoints/courses.py
# =============================================
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from uuid import UUID

from certifica.config.database import get_db
from certifica.services.course_service import CourseService
from certifica.schemas.course import CourseCreate, CourseUpdate, CourseResponse
from certifica.database.models.admin_user import AdminUser
from certifica.api.v1.endpoints.auth import get_current_admin, guard_mutation, require_confirmation

# =============================================
# ROUTER INSTANCE
# =============================================
router = APIRouter()

# =============================================
# DEPENDENCIES
# =============================================
async def get_course_service(db: AsyncSession = Depends(get_db)) -> CourseService:
    return CourseService(db)

# =============================================
# COURSE CRUD ROUTES
# =============================================

@router.post("/", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
async def create_course(
    course_data: CourseCreate,
    current_admin: AdminUser = Depends(guard_mutation),
    course_service: CourseService = Depends(get_course_service)
):
    """
    Cadastrar novo curso

    **Requer autenticação**

    - **name**: Nome do curso (salvo em maiúsculas)
    - **duration**: Carga horária (salva em maiúsculas)
    - **description**: Descrição (opcional)
    - **syllabus**: Conteúdo programático; apenas os 10 primeiros itens são impressos
    - **instructor**: Instrutor (padrão: instrutor das configurações)
    - **theme_id**: Tema do certificado (padrão: primeiro tema)
    """
    return await course_service.create_course(course_data)

@router.get("/", response_model=List[CourseResponse])
async def get_courses(
    current_admin: AdminUser = Depends(get_current_admin),
    course_service: CourseService = Depends(get_course_service)
):
    """
    Listar cursos em ordem de cadastro

    **Requer autenticação**
    """
    return await course_service.get_courses()

@router.get("/{course_id}", response_model=CourseResponse)
async def get_course(
    course_id: UUID,
    current_admin: AdminUser = Depends(get_current_admin),
    course_service: CourseService = Depends(get_course_service)
):
    """
    Obter curso por ID

    **Requer autenticação**
    """
    return await course_service.get_course(course_id)

@router.put("/{course_id}", response_model=CourseResponse)
async def update_course(
    course_id: UUID,
    course_data: CourseUpdate,
    current_admin: AdminUser = Depends(guard_mutation),
    course_service: CourseService = Depends(get_course_service)
):
    """
    Atualizar curso

    **Requer autenticação**

    Apenas os campos enviados são alterados.
    """
    return await course_service.update_course(course_id, course_data)

@router.delete("/{course_id}")
async def delete_course(
    course_id: UUID,
    confirmed: bool = Depends(require_confirmation("curso")),
    current_admin: AdminUser = Depends(guard_mutation),
    course_service: CourseService = Depends(get_course_service)
):
    """
    Excluir curso e todos os seus alunos

    **Requer autenticação e confirm=true**

    A exclusão é atômica: ou o curso e os alunos são removidos, ou nada muda.
    """
    removed_students = await course_service.delete_course(course_id)
    return {"message": "Curso excluído com sucesso", "removed_students": removed_students}
