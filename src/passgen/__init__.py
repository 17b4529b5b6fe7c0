from __future__ import annotations

from .password_generator import GenerationPolicy, PasswordGenerator, generate_password

__all__ = ['GenerationPolicy', 'PasswordGenerator', 'generate_password']
