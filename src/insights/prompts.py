from langchain_core.prompts import ChatPromptTemplate

WHERE_TO_START_PROMPT = ChatPromptTemplate.from_template("""
You are analyzing the GitHub repository "{full_name}" to help beginners find good starting points for contribution.

Repository Description: {description}
Language: {language}
Stars: {stars}
Open Issues: {open_issues}

{issues_section}

Please provide specific, actionable advice for beginners wanting to contribute to this repository. Include:
1. Concrete next steps they should take
2. What skills or knowledge would be helpful
3. How to get started even without labeled issues
4. Any patterns you notice from the repository structure

Keep the response practical and encouraging. Format as HTML with appropriate tags for better presentation.
""")

WHAT_NEEDS_IMPROVING_PROMPT = ChatPromptTemplate.from_template("""
You are analyzing the GitHub repository "{full_name}" to identify areas that need improvement.

Repository Info:
- Description: {description}
- Language: {language}
- Last updated: {updated_at}
- Has README: {has_readme}
- Has CONTRIBUTING.md: {has_contributing}
- Has CODE_OF_CONDUCT.md: {has_code_of_conduct}
- Open issues: {open_issues}
- Forks: {forks}

{readme_section}

Based on this information, identify specific areas that need improvement. Consider:
1. Documentation quality and completeness
2. Project structure and organization
3. Community guidelines and contribution processes
4. Code quality indicators
5. Maintenance and activity levels

Provide specific, actionable recommendations. Format as HTML with appropriate tags.
""")

CONTRIBUTION_RULES_PROMPT = ChatPromptTemplate.from_template("""
You are summarizing the contribution guidelines for the GitHub repository "{full_name}".

{guidelines_section}

Please provide a clear summary of:
1. How to contribute to this project (workflow, process)
2. Code style and standards requirements
3. Testing requirements
4. Communication guidelines and code of conduct
5. Any specific tools or setup needed

If information is missing, mention what contributors should look for or ask about. Format as HTML with appropriate tags.
""")

PROJECT_OVERVIEW_PROMPT = ChatPromptTemplate.from_template("""
You are providing an overview of the GitHub repository "{full_name}" for potential contributors.

Repository Details:
- Name: {name}
- Description: {description}
- Language: {language}
- Created: {created_at}
- Last updated: {updated_at}
- Stars: {stars}
- Forks: {forks}
- Open issues: {open_issues}
- License: {license}

{readme_section}

Please provide a comprehensive but concise overview including:
1. What this project does (purpose and main features)
2. Target audience and use cases
3. Technology stack and architecture
4. Project maturity and activity level
5. Why someone might want to contribute

Make it engaging and informative for potential contributors. Format as HTML with appropriate tags.
""")
