# pragma: no cover

import uvicorn

from coachlist.api.settings import ServerSettings, verify_env_vars
from coachlist.logging import setup as setup_logging

setup_logging()
verify_env_vars()

from coachlist.api.main import app  # noqa: E402

settings = ServerSettings()

# log_config=None keeps uvicorn from replacing the handlers set up above
uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
