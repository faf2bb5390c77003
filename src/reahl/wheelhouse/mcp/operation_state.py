import threading

from reahl.wheelhouse.mcp.errors import ConcurrentToolCall


class OperationState:
    def __init__(self):
        self.lock = threading.RLock()
        self.active_operation = ''

    def begin_operation(self, operation_name):
        with self.lock:
            if self.active_operation:
                raise ConcurrentToolCall(
                    'Tool "%s" cannot run while "%s" is still running.'
                    % (operation_name, self.active_operation)
                )
            self.active_operation = operation_name

    def end_operation(self):
        with self.lock:
            self.active_operation = ''

    def is_busy(self):
        with self.lock:
            return bool(self.active_operation)

    def current_operation_name(self):
        with self.lock:
            return self.active_operation
