"""HTTP errors raised by the SpeedLearn routes."""

from fastapi import HTTPException, status

from speedlearn.models.enums import Difficulty


class APIError:
    """Factories for the HTTPExceptions the routes raise."""

    @staticmethod
    def passage_not_found(passage_id: str) -> HTTPException:
        """404 for a passage id the catalog does not hold."""
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Passage not found: {passage_id}",
        )

    @staticmethod
    def module_not_found(module_id: str) -> HTTPException:
        """404 for a module id the catalog does not hold."""
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Module not found: {module_id}",
        )

    @staticmethod
    def no_passage_available(
        difficulty: Difficulty | None = None,
        module: str | None = None,
    ) -> HTTPException:
        """404 when a random pick has nothing to choose from."""
        detail = "No passages available"
        if difficulty is not None:
            detail = f"No {difficulty.value} passages available"
        if module is not None:
            detail += f" in module {module}"
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

    @staticmethod
    def invalid_submission(reason: str) -> HTTPException:
        """400 for a submission that cannot be scored."""
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=reason)
