OUTCOME_CREATED = 'created'
OUTCOME_READ = 'read'
OUTCOME_REMOVED = 'removed'
OUTCOME_UPDATED = 'updated'
OUTCOME_DELETED = 'deleted'
OUTCOME_DETACHED = 'detached'
OUTCOME_IMPORTED = 'imported'
OUTCOME_FAILED = 'failed'


class OperationResult:
    """Outcome of one lifecycle operation: resulting state or the failure."""

    def __init__(self, ok, operation, id='', state=None, outcome=None, error=None):
        """
        Initialize operation result.

        Args:
            ok (bool): True if the operation succeeded
            operation (str): Operation name (create, read, update, delete, import)
            id (str): Identifier after the operation, empty if not tracked
            state (dict, optional): State after the operation
            outcome (str, optional): One of the OUTCOME_* constants
            error (HandlerError, optional): Failure, set when ok is False
        """
        self.ok = ok
        self.operation = operation
        self.id = id
        self.state = state or {}
        self.outcome = outcome
        self.error = error

    @classmethod
    def success(cls, operation, data, outcome):
        return cls(True, operation, id=data.id, state=data.to_state(), outcome=outcome)

    @classmethod
    def failure(cls, operation, error, data=None):
        return cls(
            False,
            operation,
            id=data.id if data is not None else '',
            state=data.to_state() if data is not None else {},
            outcome=OUTCOME_FAILED,
            error=error,
        )

    def to_dict(self):
        result = {
            'ok': self.ok,
            'operation': self.operation,
            'outcome': self.outcome,
            'id': self.id,
            'state': self.state,
        }
        if self.error is not None:
            result['error'] = {'type': type(self.error).__name__, 'message': str(self.error)}
        return result

    def __repr__(self):
        return f"OperationResult(ok={self.ok}, operation={self.operation!r}, outcome={self.outcome!r}, id={self.id!r})"
