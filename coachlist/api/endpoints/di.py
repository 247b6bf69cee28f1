from typing import Annotated

from fastapi import Depends

from coachlist.api.di import DiContainer

Di = Annotated[DiContainer, Depends()]
