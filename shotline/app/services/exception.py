from werkzeug.exceptions import NotFound, BadRequest, Forbidden, Conflict


class PersonNotFoundException(NotFound):
    pass


class StatusNotFoundException(NotFound):
    pass


class ProjectNotFoundException(NotFound):
    pass


class EpisodeNotFoundException(NotFound):
    pass


class SequenceNotFoundException(NotFound):
    pass


class ShotNotFoundException(NotFound):
    pass


class AssetNotFoundException(NotFound):
    pass


class VersionNotFoundException(NotFound):
    pass


class NoteNotFoundException(NotFound):
    pass


class PlaylistNotFoundException(NotFound):
    pass


class LinkedEntityNotFoundException(NotFound):
    description = "Linked entity not found"


class ProjectPermissionNotFoundException(NotFound):
    description = "Permission not found for this user and project"


class ProjectPermissionAlreadyExistsException(Conflict):
    description = "User already has permission for this project"


class LastProjectOwnerException(Forbidden):
    description = "Cannot remove the last owner of a project"


class ProjectAccessDeniedException(Forbidden):
    description = "You do not have access to this project"


class EntryAlreadyExistsException(Conflict):
    pass


class WrongUserException(Exception):
    pass


class WrongPasswordException(BadRequest):
    pass


class UnactiveUserException(BadRequest):
    description = "User is unactive."


class WrongDateFormatException(BadRequest):
    description = "Wrong date format."


class WrongIdFormatException(BadRequest):
    description = "One of the ID sent in parameter is not properly formatted."


class WrongParameterException(BadRequest):
    def __init__(self, description=None, dict=None):
        super().__init__(description=description)
        self.dict = dict
        self.data = {"error": True, "message": description, "data": dict}
