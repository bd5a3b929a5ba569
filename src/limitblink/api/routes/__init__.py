"""Non-action API routes."""
