"""Freelance quote service - 프로젝트 평가, 가격 산정, 제안서/견적서 API."""

__version__ = "1.0.0"
