"""External collaborators: remote scorer client and LLM wrapper."""
