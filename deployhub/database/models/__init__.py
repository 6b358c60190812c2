from .project_group import ProjectGroup
from .key import Key
from .deploy_template import DeployTemplate
from .project import Project

__all__ = ["ProjectGroup", "Key", "DeployTemplate", "Project"]
