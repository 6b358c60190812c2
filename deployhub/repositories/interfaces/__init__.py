from .project import IProjectRepository
from .project_group import IProjectGroupRepository
from .key import IKeyRepository
from .deploy_template import IDeployTemplateRepository

__all__ = [
    "IProjectRepository",
    "IProjectGroupRepository",
    "IKeyRepository",
    "IDeployTemplateRepository",
]
