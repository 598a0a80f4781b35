from app.main import app  # noqa: F401  "main:app" for uvicorn

def run_http():
    """Run HTTP server on port 8000"""
    import uvicorn
    print("Starting HTTP server on port 8000...")
    uvicorn.run(
        "main:app",  # Use string import
        host="0.0.0.0",
        port=8000,
        reload=False
    )

if __name__ == "__main__":
    run_http()
