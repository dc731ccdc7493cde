# API package for the Portfolio Backend
