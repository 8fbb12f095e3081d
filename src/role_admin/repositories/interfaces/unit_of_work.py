from abc import ABC, abstractmethod

class IUnitOfWork(ABC):
    """
    리포지토리들이 공유하는 하나의 트랜잭션을 나타냅니다.
    리포지토리는 변경 사항을 쌓기만 하고, commit/rollback은 서비스가 이 객체로 수행합니다.
    """

    @abstractmethod
    def commit(self) -> None:
        """쌓인 변경 사항을 원자적으로 반영합니다."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """쌓인 변경 사항을 모두 취소합니다."""
        pass
