"""
Start a local development server for the answer writer API.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Zhihu Answer Writer Backend")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:  GET  http://localhost:8000/health")
    print("   - Search:        POST http://localhost:8000/api/search")
    print("   - Generate:      POST http://localhost:8000/api/generate")
    print("   - Frameworks:    GET  http://localhost:8000/api/frameworks")
    print("   - API Docs:           http://localhost:8000/docs")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/api/generate" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"title": "年轻人该不该买房"}\'')
    print()
    print("=" * 60)
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "zhihu_writer.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
