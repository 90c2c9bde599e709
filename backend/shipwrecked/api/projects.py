"""Projects API endpoints."""
from fastapi import APIRouter, Depends

from shipwrecked.api.deps import get_project_manager
from shipwrecked.auth.session import require_user_id
from shipwrecked.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from shipwrecked.services.projects import ProjectLifecycleManager
from shipwrecked.utils.exceptions import (
    DatabaseConnectionError,
    NotFoundError,
    ProjectCreationError,
    ValidationError,
    internal_error,
    not_found_error,
    service_unavailable_error,
    validation_error,
)
from shipwrecked.utils.logger import logger

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=list[ProjectResponse])
async def get_projects(
    user_id: str = Depends(require_user_id),
    manager: ProjectLifecycleManager = Depends(get_project_manager),
) -> list[ProjectResponse]:
    """
    Get all projects of the signed-in user.
    
    Args:
        user_id: Session user
        manager: Project lifecycle manager
        
    Returns:
        List of projects with their Hackatime links and hours
    """
    try:
        return [ProjectResponse.from_orm(p) for p in manager.list_for_user(user_id)]
    except Exception as e:
        logger.error(f"Failed to get projects for user {user_id}: {e}", exc_info=True)
        raise internal_error("Failed to fetch projects")


@router.post("", response_model=ProjectResponse)
async def create_project(
    project: ProjectCreate,
    user_id: str = Depends(require_user_id),
    manager: ProjectLifecycleManager = Depends(get_project_manager),
) -> ProjectResponse:
    """
    Create a new project owned by the signed-in user.
    
    Args:
        project: Project creation data; any userId in the body is ignored
        user_id: Session user
        manager: Project lifecycle manager
        
    Returns:
        Created project
    """
    data = project.model_copy(update={"userId": user_id})
    try:
        created = await manager.create(data)
        return ProjectResponse.from_orm(created)
    except ValidationError as e:
        raise validation_error(str(e))
    except NotFoundError:
        raise not_found_error("User", user_id)
    except DatabaseConnectionError as e:
        logger.error(f"Database unavailable while creating project: {e}")
        raise service_unavailable_error("Database unavailable")
    except ProjectCreationError as e:
        logger.error(f"Failed to create project for user {user_id}: {e}")
        raise internal_error("Failed to create project")
    except Exception as e:
        logger.error(f"Unexpected error creating project for user {user_id}: {e}", exc_info=True)
        raise internal_error("Failed to create project")


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    project_update: ProjectUpdate,
    user_id: str = Depends(require_user_id),
    manager: ProjectLifecycleManager = Depends(get_project_manager),
) -> ProjectResponse:
    """
    Update the fields present in the request body.
    
    Args:
        project_id: The project to update
        project_update: Fields to change
        user_id: Session user (must own the project)
        manager: Project lifecycle manager
        
    Returns:
        Updated project
    """
    try:
        project = manager.update(project_id, user_id, project_update)
        return ProjectResponse.from_orm(project)
    except NotFoundError:
        raise not_found_error("Project")
    except Exception as e:
        logger.error(f"Failed to update project {project_id}: {e}", exc_info=True)
        raise internal_error("Failed to update project")


@router.delete("/{project_id}")
async def delete_project(
    project_id: str,
    user_id: str = Depends(require_user_id),
    manager: ProjectLifecycleManager = Depends(get_project_manager),
) -> dict[str, str]:
    """
    Delete a project with its Hackatime links and reviews.
    
    Args:
        project_id: The project to delete
        user_id: Session user (must own the project)
        manager: Project lifecycle manager
        
    Returns:
        Success message
    """
    try:
        manager.delete(project_id, user_id)
        return {"message": "Project deleted successfully"}
    except NotFoundError:
        raise not_found_error("Project")
    except Exception as e:
        logger.error(f"Failed to delete project {project_id}: {e}", exc_info=True)
        raise internal_error("Failed to delete project")
