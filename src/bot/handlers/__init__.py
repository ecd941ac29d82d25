from .handle_initial_message import handle_initial_message
