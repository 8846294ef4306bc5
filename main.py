"""
CSS Color Converter MCP Server - FastAPI implementation
Converts the color literals of CSS documents between hex, rgb, hsl and oklch
"""

import logging
import sys
from pathlib import Path
from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

# Ensure project root is on sys.path for model imports
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.append(str(project_root))

from routers import cssColors_router

HOST = "0.0.0.0"
PORT = 8973

app = FastAPI(
    title="CSS Color Converter MCP Server",
    description="A FastAPI server that converts CSS color literals between notations",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

# Mount routers
app.include_router(cssColors_router)

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    uvicorn.run(app, host=HOST, port=PORT)
