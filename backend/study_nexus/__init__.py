"""Study plan generation and progress tracking backend."""
