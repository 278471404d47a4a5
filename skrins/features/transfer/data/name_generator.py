import shortuuid
from ..domain.interfaces import INameGenerator

class ShortUUIDNameGenerator(INameGenerator):
    """
    22-character base57 tokens (a UUID4 underneath), URL safe.
    """

    def generate(self) -> str:
        return shortuuid.uuid()
