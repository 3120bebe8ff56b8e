"""Exception hierarchy shared by the scene engine."""


class SceneEngineError(Exception):
    """Base class for all scene engine failures."""


class ConfigurationError(SceneEngineError):
    """Unknown or unsupported configuration value (fatal at startup)."""


class ContractViolation(SceneEngineError):
    """A component broke the layout contract. Aborts the affected image."""


class ContextSectionMissing(ContractViolation):
    def __init__(self, section: str, requester: str = None):
        self.section = section
        self.requester = requester
        who = f" (required by {requester})" if requester else ""
        super().__init__(f"Layout context section '{section}' not written yet{who}")


class ResourceError(SceneEngineError):
    """A required asset category cannot be satisfied."""


class ResourceLoadError(ResourceError):
    def __init__(self, resource_id: str, reason: str):
        self.resource_id = resource_id
        super().__init__(f"Failed to load resource '{resource_id}': {reason}")
