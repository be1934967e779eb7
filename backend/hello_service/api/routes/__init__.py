"""Route Modules - one file per resource, each defining its own APIRouter."""
