# deployhub/services/exceptions.py

# --- General Exceptions ---
class ProjectNotFoundError(Exception):
    """프로젝트를 찾을 수 없을 때"""
    pass


# --- Validation Exceptions ---
class ValidationError(Exception):
    """요청 데이터가 검증 규칙을 통과하지 못했을 때"""

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.errors = errors or {}
