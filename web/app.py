"""FastAPI web adapter for the MARIE simulator."""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Literal, Optional, Union

from marie import HALT_WORD, SimulatorConfig, run_program
from marie.assembler import assemble, opcode_table
from marie.errors import CycleLimitExceeded, UnknownOpcode


# Constants
MAX_PROGRAM_WORDS = 65536


# Request/Response models
class RunOptionsModel(BaseModel):
    parse_to: Literal["hexadecimal", "decimal", "binary", "octal"] = "hexadecimal"
    memory_size: int = Field(default=4096, ge=1, le=65536)
    error_logging: bool = False
    logging: bool = True
    max_cycles: int = Field(default=10000, ge=1, le=1000000)


class RunRequest(BaseModel):
    program: list[int]
    inputs: list[Union[int, str]] = Field(default_factory=list)
    initial_memory: dict[str, int] = Field(default_factory=dict)
    watch: list[int] = Field(default_factory=list)
    options: Optional[RunOptionsModel] = None


class InstructionModel(BaseModel):
    mnemonic: str
    address: int = Field(default=0, ge=0)


class AssembleRequest(BaseModel):
    instructions: list[InstructionModel]


class AssembleResponse(BaseModel):
    words: list[int]


class RunResponse(BaseModel):
    status: str
    cycles: int
    registers: dict
    outputs: list[int]
    trace: list[str]
    memory: dict
    error: Optional[dict] = None


# Create FastAPI app
app = FastAPI(
    title="MARIE Simulator",
    description="Web API for running encoded MARIE programs with tracing",
    version="0.1.0",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def cycle_limit_hook(max_cycles: int):
    """Breakpoint hook that stops a run after max_cycles cycles."""

    def _hook(sim):
        if sim.cycles >= max_cycles and sim.registers.ir != HALT_WORD:
            raise CycleLimitExceeded(f"Cycle limit exceeded: {max_cycles}", addr=sim.registers.pc)

    return _hook


@app.get("/api/opcodes")
async def list_opcodes():
    """List the instruction set."""
    return opcode_table()


@app.post("/api/assemble", response_model=AssembleResponse)
async def assemble_program(request: AssembleRequest):
    """Encode a list of mnemonic/address pairs into words."""
    try:
        words = [assemble(i.mnemonic, i.address) for i in request.instructions]
    except UnknownOpcode as e:
        raise HTTPException(status_code=400, detail=e.message)
    return {"words": words}


@app.post("/api/run", response_model=RunResponse)
async def run_code(request: RunRequest):
    """Execute an encoded program.

    Args:
        request: Program words, input values, memory presets and options

    Returns:
        Execution result with registers, outputs, trace and watched memory
    """
    if len(request.program) > MAX_PROGRAM_WORDS:
        raise HTTPException(
            status_code=400,
            detail=f"Program size exceeds limit of {MAX_PROGRAM_WORDS} words",
        )

    opts = request.options or RunOptionsModel()

    # Convert initial_memory keys from string to int
    initial_memory = {}
    for k, v in request.initial_memory.items():
        try:
            addr = int(k)
        except ValueError:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid memory address key: {k}",
            )
        if not 0 <= addr < opts.memory_size:
            raise HTTPException(
                status_code=400,
                detail=f"Memory address out of range: {k}",
            )
        initial_memory[addr] = v

    # debug is forced on so the cycle limit hook runs after every cycle
    config = SimulatorConfig(
        parse_to=opts.parse_to,
        memory_size=opts.memory_size,
        error_logging=opts.error_logging,
        debug=True,
        logging=opts.logging,
    )

    result = run_program(
        request.program,
        inputs=request.inputs,
        config=config,
        initial_memory=initial_memory,
        watch=request.watch,
        breakpoint_hook=cycle_limit_hook(opts.max_cycles),
    )

    return result.to_dict()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)
