"""
Dhan Dashboard - Application Runner
"""

import uvicorn
from dhan_dashboard.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "dhan_dashboard.main:app",
        host=settings.dash_host,
        port=settings.dash_port,
        reload=True,
        log_level="info",
    )
