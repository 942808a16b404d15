"""Task record and the request body accepted for create/replace."""

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr


class Task(BaseModel):
    id: int
    name: str
    done: bool


class TaskInput(BaseModel):
    """Body of POST /tasks and PUT /tasks/{id}.

    Only ``name`` and ``done`` are read. Unknown keys, ``id`` included, are
    dropped; the store always assigns the id. Missing keys fall back to
    their zero values. Types are decoded strictly, so ``"true"`` is not a
    boolean and ``5`` is not a name.
    """
    model_config = ConfigDict(extra="ignore")

    name: StrictStr = ""
    done: StrictBool = False
