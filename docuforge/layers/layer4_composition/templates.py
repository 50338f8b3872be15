"""
문서 종류별 마크다운 골격.

모든 템플릿은 아래 마이크로 포맷을 따릅니다 (DocumentRenderer가 해석):
- "# "   문서 제목
- "## "  섹션
- "### " 하위 섹션
- "- "   글머리 기호
- 두 칸 이상 들여쓴 줄은 들여쓴 본문
- "---"  구분선

자리표시자는 str.format 이름 인자로 채웁니다. 치환 값에 중괄호가 있어도
값 자체는 다시 해석되지 않습니다.
"""

FOOTER = """---
Generated by DocuForge on {generated_on}"""


PROJECT_SUMMARY_TEMPLATE = """# {name_upper} - PROJECT SUMMARY

## Overview
{description}

## Extended Summary
{summary_extension}

## Project Approach
{tone} This project targets {target_audience} with an anticipated completion by {launch_date}.

## Project Goal
{goal}

## Target Audience
{target_audience}

## Core Features
{features}

## Technologies
{technologies}

## Launch Date
{launch_date}

## Additional Notes
{client_notes}

## Key Project Terms
{keywords}

""" + FOOTER


TECHNICAL_REQUIREMENTS_TEMPLATE = """# {name_upper} - TECHNICAL REQUIREMENTS

## Overview
This document outlines the technical specifications and requirements for {name}. Based on analysis, this is a {complexity_description} complexity project requiring {development_effort} of development effort.

## Project Stack
{technologies}

## System Architecture
Based on the project requirements, the following architecture is recommended:

### Frontend
{frontend}

### Backend
{backend}

### Data Storage
{storage}

### Authentication
{authentication}

## Technical Dependencies
The project will require the following technical dependencies:

{dependencies}

## Security Considerations
{security}

## Development Environment
- Recommended IDE: Xcode for iOS/macOS development
- Version control: Git with feature branch workflow
- Dependency management: Swift Package Manager
- Testing framework: XCTest for unit and UI testing

## Performance Requirements
- UI responsiveness: < 100ms response time for user interactions
- Document generation: < 3 seconds for PDF creation
- Storage efficiency: Minimize document size for optimal local storage

## Development Timeline
- Development Start: Immediate
- Estimated Completion: {launch_date}
- Recommended approach: {recommended_approach}

## Technical Considerations
- Data Privacy: {privacy}
- Performance: {performance}
- Scalability: {scalability}
- Offline Support: All features must function without internet connectivity

""" + FOOTER


FEATURE_SECTION_TEMPLATE = """### Feature {number}: {feature}
Description: {description}
User Flow: {user_flow}
Success Criteria: {success_criteria}
"""


FUNCTIONAL_SPECS_TEMPLATE = """# {name_upper} - FUNCTIONAL SPECIFICATIONS

## Overview
This document outlines the functional specifications for {name}.

## Core Functionality
{feature_sections}

## User Roles and Permissions
Based on the target audience ({target_audience}), the following user roles are defined:

- Primary Users: {target_audience}
- Admin Users: Project creators and editors

## Data Entities
The following key data entities will be maintained:

- Projects
- Documents
- User Preferences

## Cross-Functional Requirements
- Usability: Intuitive, user-friendly interface
- Performance: Responsive UI, fast document generation
- Security: Local data storage only
- Offline Capability: 100% functionality without internet connection

""" + FOOTER


PHASE_SECTION_TEMPLATE = """### Phase {number}: {name} ({duration} days)
Start Date: {start_date}
End Date: {end_date}
Deliverables:
{deliverables}"""


TIMELINE_TEMPLATE = """# {name_upper} - MILESTONES & TIMELINE

## Project Timeline Overview
- Project Start: {start_date}
- Target Completion: {launch_date}
- Total Duration: {total_days} days

## Key Milestones
{phase_sections}

## Risk Assessment
- Timeline Risk: Medium
- Technical Risk: Low
- Resource Risk: Low

## Timeline Assumptions
- Full-time resource allocation
- No major scope changes
- Regular progress reviews

""" + FOOTER


NDA_TEMPLATE = """# NON-DISCLOSURE AGREEMENT - {name_upper}

## CONFIDENTIALITY AGREEMENT

This NON-DISCLOSURE AGREEMENT (the "Agreement") is made and entered into as of {effective_date} (the "Effective Date") by and between the parties.

## PROJECT DETAILS

Project Name: {name}
Project Description: {description}

## CONFIDENTIALITY TERMS

1. **Definition of Confidential Information**
   "Confidential Information" means any information disclosed by either party to the other party, either directly or indirectly, in writing, orally or by inspection of tangible objects, including without limitation documents, prototypes, samples, plant and equipment, research, product plans, products, services, customer lists, markets, software, developments, inventions, processes, formulas, technology, designs, drawings, engineering, hardware configuration, marketing or finance materials.

2. **Non-Disclosure and Non-Use**
   Each party agrees not to disclose any Confidential Information of the other party to third parties or to employees, except to those employees who are required to have the information to evaluate or engage in discussions concerning the contemplated business relationship.

3. **Term**
   The obligations under this Agreement shall remain in effect until the earlier of:
   - The Project Launch Date: {launch_date}
   - Written release from these obligations by both parties

4. **Governing Law**
   This Agreement shall be governed by and construed in accordance with the laws of [INSERT JURISDICTION].

## SIGNATURES

Party 1: _________________________ Date: _____________

Party 2: _________________________ Date: _____________

""" + FOOTER
