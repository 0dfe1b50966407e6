"""Verify that the setup is correct before fetching contributor stats."""
import os
import sys
from dotenv import load_dotenv
from contributor_stats.config import Settings
from contributor_stats.domain.errors import ConfigurationError


TOKEN_PREFIXES = ("ghp_", "github_pat_")


def check_environment_variables():
    """Check required environment variables and that they form valid settings."""
    print("Checking environment variables...")

    required_vars = ["GITHUB_PERSONAL_ACCESS_TOKEN"]
    optional_vars = ["GITHUB_USERNAME", "GITHUB_GRAPHQL_URL", "GITHUB_REQUEST_TIMEOUT"]

    missing = [var for var in required_vars if not os.getenv(var)]
    if missing:
        print(f"❌ Missing required environment variables: {', '.join(missing)}")
        return False

    try:
        Settings.from_env()
    except ConfigurationError as e:
        print(f"❌ Invalid configuration: {e}")
        return False

    print("✅ Required environment variables set")

    for var in optional_vars:
        if os.getenv(var):
            print(f"   {var}: {os.getenv(var)}")

    return True


def check_github_token():
    """Verify the GitHub token looks like a personal access token."""
    print("\nChecking GitHub token...")

    token = os.getenv("GITHUB_PERSONAL_ACCESS_TOKEN")
    if not token:
        print("❌ GITHUB_PERSONAL_ACCESS_TOKEN not set")
        return False

    if token.startswith(TOKEN_PREFIXES):
        print("✅ GitHub token format looks valid")
        print(f"   Token prefix: {token[:10]}...")
    else:
        print("⚠️  Token format may be invalid (expected ghp_* or github_pat_*)")
    # Classic 40-char hex tokens are still accepted by GitHub
    return True


def run_checks():
    """Run all checks and return their results by name."""
    checks = [
        ("Environment Variables", check_environment_variables),
        ("GitHub Token", check_github_token),
    ]

    results = {}
    for name, check_func in checks:
        try:
            results[name] = check_func()
        except Exception as e:
            print(f"❌ {name} check failed with exception: {e}")
            results[name] = False
    return results


def main():
    """Run all verification checks."""
    load_dotenv('.env') or load_dotenv('env')

    print("=" * 60)
    print("Contributor Stats - Setup Verification")
    print("=" * 60)

    results = run_checks()

    print("\n" + "=" * 60)
    print("Verification Summary")
    print("=" * 60)

    for name, passed in results.items():
        status = "✅ PASS" if passed else "❌ FAIL"
        print(f"{status}: {name}")

    if all(results.values()):
        print("\n✅ All checks passed! Ready to fetch contributor stats.")
        print("\nNext steps:")
        print("  python fetch_contributor_stats.py <username>")
        sys.exit(0)
    else:
        print("\n❌ Some checks failed. Please fix the issues above.")
        print("\nCommon solutions:")
        print("  - Set the token: export GITHUB_PERSONAL_ACCESS_TOKEN=your_token")
        print("  - Or add it to a .env file in the project root")
        sys.exit(1)


if __name__ == "__main__":
    main()
