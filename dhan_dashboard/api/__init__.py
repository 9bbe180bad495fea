# API
