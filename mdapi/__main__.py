# mdapi/__main__.py
"""
Run the API with uvicorn:
    python -m mdapi
"""

from mdapi.main import run_server

if __name__ == "__main__":
    run_server()
