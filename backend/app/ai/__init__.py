# backend/app/ai/__init__.py
"""
Generative AI package.

- GeminiClient: single-shot prompt -> text
- AIService: summary, classification and report synthesis
"""
