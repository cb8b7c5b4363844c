"""IS Learning Chatbot: educational chat widget and completion proxy."""
