"""Core building blocks shared by neo-pagination features."""
