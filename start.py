#!/usr/bin/env python3
"""
Startup script for the Kisan Sahayak backend
"""
import subprocess
import sys
from pathlib import Path


def create_env_file():
    """Create .env file if it doesn't exist"""
    env_path = Path(".env")
    if not env_path.exists():
        print("📝 Creating .env file...")

        env_content = """# Application Configuration
APP_NAME=Kisan Sahayak
APP_VERSION=1.0.0
DEBUG=false
LOG_LEVEL=INFO

# API Configuration
API_PREFIX=/api
CORS_ORIGINS=http://localhost:3000,http://localhost:8080

# Localization
SUPPORTED_LANGUAGES=en,hi
DEFAULT_LANGUAGE=en

# Optional JSON rule files (bundled rules are used when unset)
# CHAT_RULES_FILE=rules/chat.json
# SUGGESTION_RULES_FILE=rules/suggestions.json
# SCHEME_RULES_FILE=rules/schemes.json

# Eligibility scoring
SCORING_BASE_SCORE=50
SCORING_HIGH_PRIORITY_BONUS=10
"""

        with open(env_path, 'w') as f:
            f.write(env_content)

        print("✅ .env file created successfully!")
    else:
        print("✅ .env file already exists")


def check_dependencies():
    """Check if required dependencies are installed"""
    print("🔍 Checking dependencies...")

    try:
        import fastapi
        import uvicorn
        import pydantic_settings
        print("✅ All Python dependencies are installed")
        return True
    except ImportError as e:
        print(f"❌ Missing dependency: {e}")
        print("📦 Please install dependencies using: pip install -e .")
        return False


def validate_rules():
    """Load every rule store once so configuration errors surface before serving"""
    print("📚 Validating rule configuration...")

    try:
        from app.registry import load_rule_stores, registry
        from app.rule_store import ConfigurationError
    except ImportError as e:
        print(f"❌ Failed to import application: {e}")
        return False

    try:
        load_rule_stores()
    except ConfigurationError as e:
        print(f"❌ Invalid rule configuration: {e}")
        return False

    print(f"✅ {len(registry.chat_store)} chat rules, "
          f"{len(registry.suggestion_store)} suggestion rules, "
          f"{len(registry.scheme_store)} schemes")
    return True


def start_application():
    """Start the FastAPI application"""
    print("🚀 Starting the application...")

    try:
        subprocess.run([
            sys.executable, '-m', 'uvicorn',
            'app.main:app',
            '--host', '0.0.0.0',
            '--port', '8000'
        ])
    except KeyboardInterrupt:
        print("\n👋 Application stopped by user")
    except Exception as e:
        print(f"❌ Failed to start application: {e}")


def main():
    """Main startup function"""
    print("🌾 Kisan Sahayak")
    print("=" * 50)

    # Check if we're in the right directory
    if not Path("app").exists():
        print("❌ Please run this script from the project root directory")
        sys.exit(1)

    create_env_file()

    if not check_dependencies():
        sys.exit(1)

    if not validate_rules():
        sys.exit(1)

    print("\n🎯 System is ready!")
    print("\n📚 Next steps:")
    print("1. Visit http://localhost:8000/docs for API documentation")
    print("2. Ask the assistant via POST /api/chat")
    print("3. Check scheme eligibility via POST /api/schemes/eligibility")

    response = input("\n🚀 Start the application now? (y/n): ").lower().strip()
    if response in ['y', 'yes']:
        start_application()
    else:
        print("\n💡 To start the application later, run:")
        print("   uvicorn app.main:app --reload")


if __name__ == "__main__":
    main()
